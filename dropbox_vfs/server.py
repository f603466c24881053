"""
Dropbox VFS MCP Server

Exposes the Dropbox VFS module as tools:
- Listing: scandir with type / MIME / hidden-file filters
- Files: read, write, copy, move, delete, mkdir
- Queries: exists, fileinfo, url

Every tool goes through the module's request entry point, so tools behave
exactly like the shell's own VFS calls.
"""

from typing import Any, List, Optional

from fastmcp import FastMCP

from .config import SERVER_HOST, SERVER_PORT, setup_logging
from .services.vfs import DROPBOX_MODULE, VFSFile, get_module_for_path
from .services.vfs.paths import to_virtual_path

mcp = FastMCP("Dropbox VFS")


# =============================================================================
# HELPERS
# =============================================================================
def _virtual(path: str) -> str:
    """Accept both 'dropbox:///Docs' and '/Docs'."""
    if get_module_for_path(path):
        return path
    return to_virtual_path(DROPBOX_MODULE.root, path)


async def _call(name: str, path: str, *args: Any):
    """Route a request to the module mounted at path."""
    module = get_module_for_path(path) or DROPBOX_MODULE
    return await module.request(name, [path, *args])


def _format_listing(path: str, entries: List[VFSFile]) -> str:
    items = []
    for entry in entries:
        if entry.is_directory:
            items.append(f"📁 {entry.filename}/")
        else:
            items.append(f"📄 {entry.filename} ({entry.size} bytes, {entry.mime})")

    header = f"📂 {path}\n" + "─" * 40
    listing = "\n".join(items) if items else "(empty)"
    return f"{header}\n{listing}"


# =============================================================================
# HEALTH
# =============================================================================
@mcp.tool()
def ping() -> str:
    """Health check. Returns pong if the VFS server is running."""
    return "pong from Dropbox VFS 📦"


# =============================================================================
# VFS TOOLS
# =============================================================================
@mcp.tool()
async def vfs_scandir(
    path: str = "/",
    type_filter: Optional[str] = None,
    mime_filter: Optional[List[str]] = None,
    show_hidden_files: bool = True
) -> str:
    """
    List a Dropbox directory.

    Args:
        path: Directory path (e.g. "dropbox:///Documents" or "/Documents")
        type_filter: "file" or "dir" to only show one kind of entry
        mime_filter: Regex patterns; files must match one of them
        show_hidden_files: Include dot-files (default: True)

    Returns:
        Formatted listing of files and folders
    """
    target = _virtual(path)
    options = {
        "typeFilter": type_filter,
        "mimeFilter": mime_filter or [],
        "showHiddenFiles": show_hidden_files,
    }
    error, entries = await _call("scandir", target, options)
    if error:
        return f"❌ Cannot list {target}: {error}"
    return _format_listing(target, entries)


@mcp.tool()
async def vfs_read(path: str) -> str:
    """
    Read a file from Dropbox.

    Args:
        path: File path

    Returns:
        File contents as string
    """
    target = _virtual(path)
    error, content = await _call("read", target)
    if error:
        return f"❌ Cannot read {target}: {error}"
    if isinstance(content, bytes):
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError:
            return f"❌ Cannot read binary file: {target}"
    return content


@mcp.tool()
async def vfs_write(path: str, content: str) -> str:
    """
    Write content to a Dropbox file, replacing it if it exists.

    Args:
        path: File path
        content: Content to write

    Returns:
        Success message with bytes written
    """
    target = _virtual(path)
    error, _ = await _call("write", target, content)
    if error:
        return f"❌ Cannot write {target}: {error}"
    size = len(content.encode("utf-8"))
    return f"✅ Written: {target} ({size} bytes)"


@mcp.tool()
async def vfs_copy(source: str, destination: str) -> str:
    """
    Copy a file or folder.

    Args:
        source: Source path
        destination: Destination path

    Returns:
        Success or error message
    """
    src, dst = _virtual(source), _virtual(destination)
    error, _ = await _call("copy", src, dst)
    if error:
        return f"❌ Copy failed: {error}"
    return f"✅ Copied: {src} → {dst}"


@mcp.tool()
async def vfs_move(source: str, destination: str) -> str:
    """
    Move or rename a file or folder.

    Args:
        source: Source path
        destination: Destination path

    Returns:
        Success or error message
    """
    src, dst = _virtual(source), _virtual(destination)
    error, _ = await _call("move", src, dst)
    if error:
        return f"❌ Move failed: {error}"
    return f"✅ Moved: {src} → {dst}"


@mcp.tool()
async def vfs_unlink(path: str) -> str:
    """
    Delete a file or folder.

    Args:
        path: Path to delete

    Returns:
        Success or error message
    """
    target = _virtual(path)
    error, _ = await _call("unlink", target)
    if error:
        return f"❌ Delete failed: {error}"
    return f"✅ Deleted: {target}"


@mcp.tool()
async def vfs_mkdir(path: str) -> str:
    """
    Create a folder.

    Args:
        path: Folder path

    Returns:
        Success message
    """
    target = _virtual(path)
    error, _ = await _call("mkdir", target)
    if error:
        return f"❌ mkdir failed: {error}"
    return f"✅ Created directory: {target}"


@mcp.tool()
async def vfs_exists(path: str) -> str:
    """
    Check whether a file exists.

    Args:
        path: File path

    Returns:
        "true" or "false", or an error message
    """
    target = _virtual(path)
    error, found = await _call("exists", target)
    if error:
        return f"❌ {error}"
    return "true" if found else "false"


@mcp.tool()
async def vfs_fileinfo(path: str) -> str:
    """
    Get information about a file.

    Args:
        path: File path

    Returns:
        File information or error message
    """
    target = _virtual(path)
    error, info = await _call("fileinfo", target)
    if error:
        return f"❌ {error}"
    return str(info)


@mcp.tool()
async def vfs_url(path: str) -> str:
    """
    Get a temporary download URL for a file.

    Args:
        path: File path

    Returns:
        The URL, or error message
    """
    target = _virtual(path)
    error, link = await _call("url", target)
    if error:
        return f"❌ Cannot resolve URL for {target}: {error}"
    return link


# =============================================================================
# MAIN
# =============================================================================
def main() -> None:
    setup_logging()
    mcp.run(transport="http", host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
