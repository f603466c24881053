"""VFS adapters for the supported storage providers."""

from .dropbox import DropboxAdapter, DROPBOX_ROOT

# Adapter registry
ADAPTERS = {
    "dropbox": DropboxAdapter,
}

__all__ = ["ADAPTERS", "DropboxAdapter", "DROPBOX_ROOT"]
