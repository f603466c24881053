"""
Infrastructure Secrets Manager

Singleton manager for infrastructure secrets.
Loads backend configuration and provides unified access.

Usage:
    from dropbox_vfs.core.secrets import secrets_manager

    # Get a secret from the default backend
    key = await secrets_manager.get("Dropbox App", field="app_key")

    # Get using full reference
    token = await secrets_manager.get_ref("op://Key Vault/Dropbox/refresh_token")

    # Resolve a config value that may or may not be a reference
    value = await secrets_manager.resolve(metadata.config["ClientKey"])
"""

import json
import logging
from pathlib import Path
from typing import Optional, Dict, Type

from ...config import SECRETS_CONFIG
from .interface import SecretsBackend
from .onepassword_backend import OnePasswordBackend

logger = logging.getLogger(__name__)

# Registry of available backends
BACKENDS: Dict[str, Type[SecretsBackend]] = {
    "onepassword": OnePasswordBackend,
    "1password": OnePasswordBackend,  # Alias
}

# Default configuration if no config file exists
DEFAULT_CONFIG = {
    "backends": {
        "default": {
            "adapter": "onepassword",
            "vault": "Key Vault",
            "service_account_env": "OP_SERVICE_ACCOUNT_TOKEN"
        }
    },
    "default_backend": "default"
}


class SecretsManager:
    """
    Manages infrastructure secrets backends.

    Service adapters use this to get their credentials.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or SECRETS_CONFIG
        self._config: Dict = {}
        self._backends: Dict[str, SecretsBackend] = {}
        self._default_backend: str = "default"
        self._loaded = False

    def _load_config(self) -> None:
        """Load backend configuration from file."""
        if self._loaded:
            return

        if self.config_path.exists():
            try:
                self._config = json.loads(self.config_path.read_text())
                logger.info(f"Loaded secrets config from {self.config_path}")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load secrets config: {e}")
                self._config = DEFAULT_CONFIG
        else:
            self._config = DEFAULT_CONFIG
            logger.info("Using default secrets configuration")

        self._default_backend = self._config.get("default_backend", "default")
        self._loaded = True

    def _get_backend(self, name: str) -> SecretsBackend:
        """Get or create a backend instance."""
        self._load_config()

        if name in self._backends:
            return self._backends[name]

        backend_config = self._config.get("backends", {}).get(name)
        if not backend_config:
            raise KeyError(f"Unknown secrets backend: {name}")

        adapter_type = backend_config.get("adapter", "onepassword")
        if adapter_type not in BACKENDS:
            raise ValueError(f"Unknown backend adapter type: {adapter_type}")

        backend = BACKENDS[adapter_type](backend_config)
        self._backends[name] = backend

        return backend

    def _backend_for_ref(self, reference: str) -> Optional[str]:
        """Find a configured backend whose reference format matches."""
        self._load_config()
        for name, config in self._config.get("backends", {}).items():
            backend_class = BACKENDS.get(config.get("adapter", "onepassword"))
            if backend_class and backend_class.reference_prefix and reference.startswith(backend_class.reference_prefix):
                return name
        return None

    def is_reference(self, value: object) -> bool:
        """True when value looks like a reference some backend can resolve."""
        if not isinstance(value, str):
            return False
        return any(
            cls.reference_prefix and value.startswith(cls.reference_prefix)
            for cls in BACKENDS.values()
        )

    async def get(
        self,
        item: str,
        field: str = "credential",
        backend: Optional[str] = None
    ) -> str:
        """
        Get a secret value.

        Args:
            item: Item name
            field: Field name (default: "credential")
            backend: Backend name (default: use default_backend from config)

        Returns:
            The secret value
        """
        self._load_config()
        backend_name = backend or self._default_backend
        return await self._get_backend(backend_name).get(item, field)

    async def get_ref(self, reference: str, backend: Optional[str] = None) -> str:
        """
        Get a secret using a provider-specific reference.

        Args:
            reference: Full reference URI (e.g., "op://vault/item/field")
            backend: Backend name (optional - inferred from the reference)

        Returns:
            The secret value
        """
        self._load_config()
        backend_name = backend or self._backend_for_ref(reference) or self._default_backend
        return await self._get_backend(backend_name).get_ref(reference)

    async def resolve(self, value: Optional[str]) -> Optional[str]:
        """Resolve value if it is a secret reference, else return it unchanged."""
        if self.is_reference(value):
            return await self.get_ref(value)
        return value


# Singleton instance
secrets_manager = SecretsManager()
