# Test configuration

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from dropbox.files import FileMetadata, FolderMetadata

from dropbox_vfs.services.vfs.adapters.dropbox import DropboxAdapter
from dropbox_vfs.services.vfs.interface import ExtensionMetadata, PreloadSource
from dropbox_vfs.services.vfs.manager import VFSManager


def make_file(path: str, size: int = 0) -> FileMetadata:
    return FileMetadata(name=path.rsplit("/", 1)[-1], path_display=path, size=size)


def make_folder(path: str) -> FolderMetadata:
    return FolderMetadata(name=path.rsplit("/", 1)[-1], path_display=path)


def make_listing(entries, has_more=False, cursor="cursor-1"):
    listing = MagicMock()
    listing.entries = entries
    listing.has_more = has_more
    listing.cursor = cursor
    return listing


@pytest.fixture
def metadata():
    """Extension metadata with a client key and one preload."""
    return ExtensionMetadata(
        name="ExtensionDropboxVFS",
        config={"ClientKey": "app-key", "RefreshToken": "refresh-token"},
        sources=[
            PreloadSource(src="json", type="module", preload=True),
            PreloadSource(src="not_preloaded", type="module", preload=False),
        ],
    )


@pytest.fixture
def secrets():
    """Secrets manager that hands values back unchanged."""
    fake = MagicMock()
    fake.resolve = AsyncMock(side_effect=lambda value: value)
    return fake


@pytest.fixture
def client():
    """Stand-in for an authenticated dropbox.Dropbox client."""
    return MagicMock()


@pytest.fixture
def adapter(metadata, secrets, client):
    """Adapter wired to the fake client, as if init() had succeeded."""
    adapter = DropboxAdapter(metadata, secrets=secrets)
    adapter._client = client
    return adapter


@pytest.fixture
def metadata_file(tmp_path):
    """Metadata JSON on disk, the way the manager reads it."""
    path = tmp_path / "dropbox_vfs.json"
    path.write_text(json.dumps({
        "name": "ExtensionDropboxVFS",
        "config": {"ClientKey": "app-key"},
        "sources": [{"type": "module", "src": "json", "preload": True}],
    }))
    return path


@pytest.fixture
def manager(metadata_file):
    return VFSManager(metadata_path=metadata_file)
