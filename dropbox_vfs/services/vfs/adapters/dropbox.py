"""
Dropbox VFS Adapter

Implements VFSAdapter for Dropbox on top of the official dropbox SDK.
"""

import asyncio
import logging
import mimetypes
from typing import Any, Dict, List, Optional, Union

import dropbox
from dropbox.files import FolderMetadata, WriteMode

from ....core.secrets import SecretsManager, secrets_manager
from ..filters import filter_scandir
from ..interface import VFSAdapter, VFSFile, VFSInitError, ExtensionMetadata, Item
from ..paths import to_provider_path, to_virtual_path
from ..preload import preload

logger = logging.getLogger(__name__)

DROPBOX_ROOT = "dropbox:///"
DEFAULT_MIME = "application/octet-stream"

# Metadata config key -> dropbox.Dropbox keyword
CREDENTIAL_KEYS = {
    "ClientKey": "app_key",
    "ClientSecret": "app_secret",
    "RefreshToken": "oauth2_refresh_token",
    "AccessToken": "oauth2_access_token",
}


def _join_chunks(payload: Any) -> Union[str, bytes]:
    """Join a chunked payload with newlines; pass single payloads through."""
    if isinstance(payload, (list, tuple)):
        if payload and isinstance(payload[0], bytes):
            return b"\n".join(payload)
        return "\n".join(payload)
    return payload


class DropboxAdapter(VFSAdapter):
    """Dropbox VFS adapter."""

    adapter_type = "dropbox"

    def __init__(
        self,
        metadata: ExtensionMetadata,
        root: str = DROPBOX_ROOT,
        secrets: Optional[SecretsManager] = None
    ):
        super().__init__(metadata)
        self.root = root
        self.secrets = secrets or secrets_manager

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def _credentials(self) -> Dict[str, str]:
        """Build dropbox.Dropbox keywords from the metadata config."""
        config = self.metadata.config
        if not config.get("ClientKey"):
            raise VFSInitError("No ClientKey configured for Dropbox VFS")

        credentials = {}
        for key, kwarg in CREDENTIAL_KEYS.items():
            value = await self.secrets.resolve(config.get(key))
            if value:
                credentials[kwarg] = value

        if not (credentials.get("oauth2_refresh_token") or credentials.get("oauth2_access_token")):
            raise VFSInitError("Dropbox VFS needs a RefreshToken or an AccessToken")
        return credentials

    async def init(self) -> None:
        """Run the preload pass, then authenticate the Dropbox client."""
        total, errors = preload(self.metadata.preloads)
        if errors:
            raise VFSInitError(", ".join(errors))
        logger.debug(f"Preloaded {total} source(s)")

        credentials = await self._credentials()
        self._client = dropbox.Dropbox(**credentials)

        account = await asyncio.to_thread(self._client.users_get_current_account)
        logger.info(f"✅ Connected to Dropbox: {account.email}")

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def _to_file(self, entry) -> VFSFile:
        """Project a Dropbox metadata record onto a VFSFile."""
        is_dir = isinstance(entry, FolderMetadata)
        mime = None
        if not is_dir:
            mime = mimetypes.guess_type(entry.name)[0] or DEFAULT_MIME

        return VFSFile(
            filename=entry.name,
            path=to_virtual_path(self.root, entry.path_display),
            size=0 if is_dir else getattr(entry, "size", 0),
            mime=mime,
            type="dir" if is_dir else "file",
        )

    async def scandir(self, item: Item, options: Optional[Dict[str, Any]] = None) -> List[VFSFile]:
        """List a Dropbox folder, following the cursor until it runs out."""
        path = to_provider_path(item)
        logger.info(f"scandir: {path or '/'}")

        result = await asyncio.to_thread(self._client.files_list_folder, path)
        entries = list(result.entries)
        while result.has_more:
            result = await asyncio.to_thread(self._client.files_list_folder_continue, result.cursor)
            entries.extend(result.entries)

        files = [self._to_file(entry) for entry in entries]
        return filter_scandir(files, options)

    async def write(self, item: Item, data: Union[str, bytes]) -> bool:
        """Upload data, replacing whatever is at the path."""
        path = to_provider_path(item)
        logger.info(f"write: {path}")

        if isinstance(data, str):
            data = data.encode("utf-8")
        await asyncio.to_thread(self._client.files_upload, data, path, mode=WriteMode.overwrite)
        return True

    async def read(self, item: Item) -> Union[str, bytes]:
        """Download a file's content."""
        path = to_provider_path(item)
        logger.info(f"read: {path}")

        _, response = await asyncio.to_thread(self._client.files_download, path)
        try:
            return _join_chunks(response.content)
        finally:
            response.close()

    async def copy(self, src: Item, dest: Item) -> bool:
        spath, dpath = to_provider_path(src), to_provider_path(dest)
        logger.info(f"copy: {spath} -> {dpath}")

        await asyncio.to_thread(self._client.files_copy_v2, spath, dpath)
        return True

    async def move(self, src: Item, dest: Item) -> bool:
        spath, dpath = to_provider_path(src), to_provider_path(dest)
        logger.info(f"move: {spath} -> {dpath}")

        await asyncio.to_thread(self._client.files_move_v2, spath, dpath)
        return True

    async def unlink(self, item: Item) -> bool:
        path = to_provider_path(item)
        logger.info(f"unlink: {path}")

        await asyncio.to_thread(self._client.files_delete_v2, path)
        return True

    async def mkdir(self, item: Item) -> bool:
        path = to_provider_path(item)
        logger.info(f"mkdir: {path}")

        await asyncio.to_thread(self._client.files_create_folder_v2, path)
        return True

    async def exists(self, item: Item) -> bool:
        """
        Check existence by attempting a read.

        True when the read succeeds. Whatever error the read raises (a
        not-found ApiError included) propagates, so the caller gets the
        same error a read would have given.
        """
        # FIXME: files_get_metadata would avoid downloading the whole file
        await self.read(item)
        return True

    async def fileinfo(self, item: Item) -> Dict[str, Any]:
        logger.info(f"fileinfo: {to_provider_path(item)}")
        raise NotImplementedError("Not implemented")

    async def url(self, item: Item) -> str:
        """Mint a temporary download link."""
        path = to_provider_path(item)
        logger.info(f"url: {path}")

        result = await asyncio.to_thread(self._client.files_get_temporary_link, path)
        return result.link
