"""
Path translation between the shell's virtual path space and Dropbox paths.

    dropbox:///Docs/a.txt  ->  /Docs/a.txt   (relative URL)
    dropbox:///            ->  ""            (Dropbox root)
"""

import re
from typing import Mapping

from .interface import Item, VFSFile

PROTOCOL_RE = re.compile(r"^([A-Za-z0-9\-_]+)://")


def item_path(item: Item) -> str:
    """Get the virtual path out of an entry, a mapping or a plain string."""
    if isinstance(item, str):
        return item
    if isinstance(item, VFSFile):
        return item.path
    if isinstance(item, Mapping) and "path" in item:
        return item["path"]
    path = getattr(item, "path", None)
    if isinstance(path, str):
        return path
    raise ValueError(f"Item has no path: {item!r}")


def get_relative_url(path: str) -> str:
    """Strip the protocol prefix from a virtual path."""
    return PROTOCOL_RE.sub("", path, count=1)


def to_provider_path(item: Item) -> str:
    """Translate an item into the path Dropbox expects."""
    path = get_relative_url(item_path(item))
    if not path.startswith("/"):
        path = "/" + path
    path = path.rstrip("/")
    # Dropbox addresses its root as the empty string
    return path


def to_virtual_path(root: str, provider_path: str) -> str:
    """Join a module root and a Dropbox display path back into a virtual path."""
    if provider_path and not provider_path.startswith("/"):
        provider_path = "/" + provider_path
    # Only the one trailing slash goes; "dropbox:///" keeps its "//"
    if root.endswith("/"):
        root = root[:-1]
    return root + (provider_path or "/")
