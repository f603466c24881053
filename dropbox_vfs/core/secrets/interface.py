"""
Infrastructure Secrets Interface

Defines the abstract interface for secrets backends.
The VFS adapter uses it to resolve its Dropbox credentials.
"""

from abc import ABC, abstractmethod


class SecretsBackend(ABC):
    """
    Abstract base class for secrets backends.

    Implementations provide access to a specific secrets provider
    (1Password, Bitwarden, encrypted local files, etc.)
    """

    backend_type: str = "base"
    reference_prefix: str = ""

    def __init__(self, config: dict):
        """
        Initialize the backend.

        Args:
            config: Backend-specific configuration dict
        """
        self.config = config

    @abstractmethod
    async def connect(self) -> bool:
        """
        Initialize connection to the secrets provider.

        Returns:
            True if connection successful
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection to the secrets provider."""
        pass

    @abstractmethod
    async def get(self, item: str, field: str = "credential") -> str:
        """
        Get a secret value.

        Args:
            item: Item name or identifier
            field: Field name within the item (default: "credential")

        Returns:
            The secret value

        Raises:
            KeyError: If item or field not found
            ConnectionError: If not connected
        """
        pass

    @abstractmethod
    async def get_ref(self, reference: str) -> str:
        """
        Get a secret using a provider-specific reference URI.

        Args:
            reference: Full reference (e.g., "op://vault/item/field" for 1Password)

        Returns:
            The secret value

        Raises:
            KeyError: If reference not found
            ValueError: If reference format invalid
        """
        pass
