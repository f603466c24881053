"""
Dropbox VFS

Mounts a Dropbox account as a virtual filesystem module:
- services.vfs: adapter, manager, module descriptor
- core.secrets: credential resolution
- server: MCP tools over the VFS module
"""

__version__ = "1.0.0"
