"""
VFS Service Interface

Core abstraction for mountable filesystem modules. Adapters implement this
interface to expose a cloud storage account (Dropbox, etc.) to the shell's
virtual filesystem dispatcher.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field


class VFSError(Exception):
    """Base class for VFS errors raised by this package."""
    pass


class VFSInitError(VFSError):
    """Raised when preloading or authenticating the adapter fails."""
    pass


class NoInstanceError(VFSError):
    """Reported for every request while no initialized adapter exists."""

    MESSAGE = "No Dropbox VFS API Instance was ever created. Possible initialization error"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


@dataclass
class VFSFile:
    """A file or directory entry as the shell sees it."""
    filename: str
    path: str
    size: int = 0
    mime: Optional[str] = None
    type: str = "file"

    @property
    def is_directory(self) -> bool:
        return self.type == "dir"


@dataclass
class PreloadSource:
    """A resource the extension declares in its metadata."""
    src: str
    type: str = "module"
    preload: bool = False


@dataclass
class ExtensionMetadata:
    """Application metadata for the extension (client key, sources)."""
    name: str
    config: Dict[str, Any] = field(default_factory=dict)
    sources: List[PreloadSource] = field(default_factory=list)

    @property
    def preloads(self) -> List[PreloadSource]:
        return [s for s in self.sources if s.preload]


# Anything that carries a path: an entry, a {"path": ...} mapping, or a string
Item = Union[VFSFile, Dict[str, Any], str]


class VFSAdapter(ABC):
    """Base class for VFS adapters."""

    adapter_type: str = "base"

    def __init__(self, metadata: ExtensionMetadata):
        self.metadata = metadata
        self._client = None

    @abstractmethod
    async def init(self) -> None:
        """Load preloads and authenticate. Raises on failure."""
        pass

    @abstractmethod
    async def scandir(self, item: Item, options: Optional[Dict[str, Any]] = None) -> List[VFSFile]:
        """List a directory."""
        pass

    @abstractmethod
    async def write(self, item: Item, data: Union[str, bytes]) -> bool:
        """Write data to a file."""
        pass

    @abstractmethod
    async def read(self, item: Item) -> Union[str, bytes]:
        """Read a file."""
        pass

    @abstractmethod
    async def copy(self, src: Item, dest: Item) -> bool:
        """Copy a file or directory."""
        pass

    @abstractmethod
    async def move(self, src: Item, dest: Item) -> bool:
        """Move or rename a file or directory."""
        pass

    @abstractmethod
    async def unlink(self, item: Item) -> bool:
        """Delete a file or directory."""
        pass

    @abstractmethod
    async def mkdir(self, item: Item) -> bool:
        """Create a directory."""
        pass

    @abstractmethod
    async def exists(self, item: Item) -> bool:
        """Check if a path exists."""
        pass

    async def fileinfo(self, item: Item) -> Dict[str, Any]:
        """Get info about a file. Override if the provider supports it."""
        raise NotImplementedError("Not implemented")

    @abstractmethod
    async def url(self, item: Item) -> str:
        """Resolve a URL the file can be fetched from."""
        pass
