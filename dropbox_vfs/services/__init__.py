"""
Dropbox VFS Services

Each service follows the same pattern:
- interface.py: ABC defining the contract + dataclasses
- manager.py: metadata loading, adapter lifecycle, request routing
- adapters/: Platform-specific implementations
"""
