"""
VFS Manager

Loads the extension metadata, owns the single adapter instance and routes
named requests from the shell to it.
"""

import asyncio
import inspect
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from ...config import METADATA_FILE
from .adapters import ADAPTERS
from .interface import VFSAdapter, ExtensionMetadata, PreloadSource, NoInstanceError

logger = logging.getLogger(__name__)

EXTENSION_NAME = "ExtensionDropboxVFS"

# Operations the shell may request by name
OPERATIONS = frozenset({
    "scandir", "write", "read", "copy", "move",
    "unlink", "mkdir", "exists", "fileinfo", "url",
})

Result = Tuple[Optional[BaseException], Any]


class VFSManager:
    """
    Manages the lifecycle of the VFS adapter.

    The adapter is created and initialized on first use and memoized. A
    failed initialization leaves no instance behind. Callers already waiting
    on that attempt get None; the next request after it tries again.
    """

    def __init__(self, metadata_path: Optional[Path] = None, adapter: str = "dropbox"):
        self.metadata_path = metadata_path or METADATA_FILE
        self.adapter_type = adapter
        self.adapter_classes: Dict[str, Type[VFSAdapter]] = dict(ADAPTERS)
        self._metadata: Optional[ExtensionMetadata] = None
        self._instance: Optional[VFSAdapter] = None
        self._lock = asyncio.Lock()
        self._failures = 0

    def register_adapter_type(self, adapter_type: str, adapter_class: Type[VFSAdapter]) -> None:
        """Register an adapter implementation."""
        self.adapter_classes[adapter_type] = adapter_class
        logger.info(f"✅ Registered VFS adapter: {adapter_type}")

    def load_metadata(self) -> ExtensionMetadata:
        """Load the extension metadata from its JSON file."""
        if self._metadata is not None:
            return self._metadata

        if not self.metadata_path.exists():
            logger.info(f"No metadata found at {self.metadata_path}, using empty config")
            self._metadata = ExtensionMetadata(name=EXTENSION_NAME)
            return self._metadata

        data = json.loads(self.metadata_path.read_text())
        sources: List[PreloadSource] = [
            PreloadSource(
                src=s["src"],
                type=s.get("type", "module"),
                preload=bool(s.get("preload", False))
            )
            for s in data.get("sources", [])
        ]
        self._metadata = ExtensionMetadata(
            name=data.get("name", EXTENSION_NAME),
            config=data.get("config", {}),
            sources=sources
        )
        logger.info(f"✅ Loaded metadata for {self._metadata.name} ({len(sources)} sources)")
        return self._metadata

    @property
    def instance(self) -> Optional[VFSAdapter]:
        return self._instance

    async def get_instance(self) -> Optional[VFSAdapter]:
        """Get or create the initialized adapter, or None if that fails."""
        if self._instance is not None:
            return self._instance

        seen = self._failures
        async with self._lock:
            # Another caller may have finished while we waited
            if self._instance is not None:
                return self._instance
            # ...or failed; its waiters share that failure
            if self._failures != seen:
                return None

            if self.adapter_type not in self.adapter_classes:
                logger.error(f"Adapter not registered: {self.adapter_type}")
                return None

            try:
                adapter = self.adapter_classes[self.adapter_type](self.load_metadata())
                await adapter.init()
            except Exception as e:
                logger.error(f"❌ Failed to initialize {self.adapter_type} VFS: {e}")
                self._failures += 1
                return None

            self._instance = adapter
            return adapter

    def reset(self) -> None:
        """Forget the adapter and metadata; the next request starts over."""
        self._instance = None
        self._metadata = None

    async def request(
        self,
        name: str,
        args: Optional[List[Any]] = None,
        callback: Optional[Callable[[Optional[BaseException], Any], Any]] = None
    ) -> Result:
        """
        Run a named operation and report (error, result).

        Args:
            name: Operation name ("scandir", "read", ...)
            args: Positional arguments for the operation
            callback: Optional callable receiving (error, result); may be async

        Returns:
            The same (error, result) pair handed to the callback. Errors
            raised by the provider are passed through untouched.
        """
        args = list(args or [])

        if name not in OPERATIONS:
            outcome: Result = (AttributeError(f"Unknown VFS operation: {name}"), None)
        else:
            instance = await self.get_instance()
            if instance is None:
                outcome = (NoInstanceError(), None)
            else:
                try:
                    outcome = (None, await getattr(instance, name)(*args))
                except Exception as e:
                    logger.warning(f"{name} failed: {e}")
                    outcome = (e, None)

        if callback is not None:
            ret = callback(*outcome)
            if inspect.isawaitable(ret):
                await ret

        return outcome


# Singleton instance
vfs_manager = VFSManager()
