"""VFS Service - mountable cloud storage for the shell."""

from .interface import (
    VFSAdapter,
    VFSFile,
    ExtensionMetadata,
    PreloadSource,
    VFSError,
    VFSInitError,
    NoInstanceError,
)
from .filters import ScandirOptions, filter_scandir
from .manager import VFSManager, vfs_manager
from .module import VFSModule, DROPBOX_MODULE, MODULES, get_module_for_path
from .adapters.dropbox import DropboxAdapter

__all__ = [
    "VFSAdapter",
    "VFSFile",
    "ExtensionMetadata",
    "PreloadSource",
    "VFSError",
    "VFSInitError",
    "NoInstanceError",
    "ScandirOptions",
    "filter_scandir",
    "VFSManager",
    "vfs_manager",
    "VFSModule",
    "DROPBOX_MODULE",
    "MODULES",
    "get_module_for_path",
    "DropboxAdapter",
]
