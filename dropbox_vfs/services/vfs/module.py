"""
VFS module descriptors.

A descriptor is what the shell sees of a mounted filesystem: its name, its
root, the pattern used to route paths to it, and the request entry point.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .adapters import DROPBOX_ROOT
from .manager import vfs_manager


@dataclass(frozen=True)
class VFSModule:
    """A mountable filesystem module."""
    description: str
    root: str
    match: re.Pattern
    request: Callable[..., Any]
    icon: str = ""
    visible: bool = True
    enabled: Callable[[], bool] = lambda: True

    def handles(self, path: str) -> bool:
        return bool(self.match.match(path)) and self.enabled()


DROPBOX_MODULE = VFSModule(
    description="Dropbox",
    visible=True,
    enabled=lambda: True,
    root=DROPBOX_ROOT,
    icon="places/dropbox.png",
    match=re.compile(r"^dropbox://"),
    request=vfs_manager.request,
)

# Mounted modules by name
MODULES: Dict[str, VFSModule] = {
    "Dropbox": DROPBOX_MODULE,
}


def get_module_for_path(path: str) -> Optional[VFSModule]:
    """Route a virtual path to the first enabled module that matches it."""
    for module in MODULES.values():
        if module.handles(path):
            return module
    return None
