"""
1Password Secrets Backend

Implements SecretsBackend for 1Password using the official SDK.
"""

import os
import logging

from onepassword.client import Client

from .interface import SecretsBackend

logger = logging.getLogger(__name__)


class OnePasswordBackend(SecretsBackend):
    """
    1Password secrets backend.

    Config:
        vault: Default vault name (required)
        service_account_env: Environment variable name for service account token
                            (default: "OP_SERVICE_ACCOUNT_TOKEN")
    """

    backend_type = "onepassword"
    reference_prefix = "op://"

    def __init__(self, config: dict):
        super().__init__(config)
        self.vault = config.get("vault", "Key Vault")
        self.service_account_env = config.get("service_account_env", "OP_SERVICE_ACCOUNT_TOKEN")
        self._client = None

    async def connect(self) -> bool:
        """Initialize 1Password client."""
        token = os.getenv(self.service_account_env)
        if not token:
            logger.error(f"Environment variable {self.service_account_env} not set")
            return False

        try:
            self._client = await Client.authenticate(
                auth=token,
                integration_name="Dropbox VFS",
                integration_version="v1.0.0"
            )
        except Exception as e:
            logger.error(f"❌ Failed to connect to 1Password: {e}")
            return False

        logger.info(f"✅ Connected to 1Password vault: {self.vault}")
        return True

    async def disconnect(self) -> None:
        """Disconnect from 1Password."""
        self._client = None

    async def _ensure_connected(self):
        """Ensure we're connected, auto-connect if not."""
        if self._client is None:
            if not await self.connect():
                raise ConnectionError("Failed to connect to 1Password")

    async def get(self, item: str, field: str = "credential") -> str:
        """Get a secret from 1Password."""
        await self._ensure_connected()

        secret_ref = f"op://{self.vault}/{item}/{field}"
        try:
            return await self._client.secrets.resolve(secret_ref)
        except Exception as e:
            raise KeyError(f"Secret not found: {item}/{field} in {self.vault}: {e}")

    async def get_ref(self, reference: str) -> str:
        """Get a secret using full op:// reference."""
        if not reference.startswith(self.reference_prefix):
            raise ValueError(f"Invalid 1Password reference format: {reference}")

        await self._ensure_connected()

        try:
            return await self._client.secrets.resolve(reference)
        except Exception as e:
            raise KeyError(f"Secret reference not found: {reference}: {e}")
