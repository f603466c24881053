"""
Directory listing filters applied to every scandir result.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .interface import VFSFile

HIDDEN_RE = re.compile(r"^\.\w")


@dataclass
class ScandirOptions:
    """Caller-supplied listing options."""
    type_filter: Optional[str] = None       # "file", "dir" or None for both
    mime_filter: List[str] = field(default_factory=list)  # regex patterns
    show_hidden_files: bool = True
    backlink: bool = False

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]]) -> "ScandirOptions":
        """Accept both the shell's camelCase keys and snake_case keys."""
        options = options or {}
        return cls(
            type_filter=options.get("typeFilter", options.get("type_filter")),
            mime_filter=list(options.get("mimeFilter", options.get("mime_filter")) or []),
            show_hidden_files=options.get("showHiddenFiles", options.get("show_hidden_files", True)),
            backlink=options.get("backlink", False),
        )


def _keep_entry(entry: VFSFile, options: ScandirOptions) -> bool:
    if entry.filename == "..":
        return True
    if options.type_filter and entry.type != options.type_filter:
        return False
    if not options.show_hidden_files and HIDDEN_RE.match(entry.filename):
        return False
    return True


def _valid_mime(entry: VFSFile, options: ScandirOptions) -> bool:
    if not options.mime_filter or not entry.mime:
        return True
    return any(re.search(pattern, entry.mime) for pattern in options.mime_filter)


def filter_scandir(
    entries: List[VFSFile],
    options: Union[ScandirOptions, Dict[str, Any], None] = None
) -> List[VFSFile]:
    """
    Filter a listing without reordering it.

    Entries keep the order the provider returned them in. The ".." backlink
    only survives when options.backlink is set; the MIME filter only applies
    to files.
    """
    if not isinstance(options, ScandirOptions):
        options = ScandirOptions.from_dict(options)

    result = []
    for entry in entries:
        if entry.filename == ".." and not options.backlink:
            continue
        if not _keep_entry(entry, options):
            continue
        if entry.type == "file" and not _valid_mime(entry, options):
            continue
        result.append(entry)
    return result
