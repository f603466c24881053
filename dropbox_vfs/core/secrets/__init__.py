"""
Infrastructure Secrets Module

Provides internal access to secrets for the VFS adapter.
NOT exposed as MCP tools - this is plumbing.

Configuration:
    Backends are configured in /data/config/secrets_backends.json
    (override with DROPBOX_VFS_SECRETS_CONFIG):

    {
        "backends": {
            "personal": {
                "adapter": "onepassword",
                "vault": "Key Vault",
                "service_account_env": "OP_SERVICE_ACCOUNT_TOKEN"
            }
        },
        "default_backend": "personal"
    }
"""

from .interface import SecretsBackend
from .manager import secrets_manager, SecretsManager, BACKENDS
from .onepassword_backend import OnePasswordBackend

__all__ = [
    "secrets_manager",
    "SecretsManager",
    "SecretsBackend",
    "OnePasswordBackend",
    "BACKENDS",
]
