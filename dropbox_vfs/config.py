"""
Shared configuration constants for Dropbox VFS.

Import from here to avoid duplication across server.py, the VFS manager and
the secrets backends. Every path can be overridden from the environment.
"""

import logging
import os
from pathlib import Path

# Base paths
DATA_ROOT = Path(os.getenv("DROPBOX_VFS_ROOT", "/data"))
CONFIG_DIR = DATA_ROOT / "config"

# Extension metadata (client key + preload sources)
METADATA_FILE = Path(os.getenv("DROPBOX_VFS_METADATA", str(CONFIG_DIR / "dropbox_vfs.json")))

# Secrets backends config
SECRETS_CONFIG = Path(os.getenv("DROPBOX_VFS_SECRETS_CONFIG", str(CONFIG_DIR / "secrets_backends.json")))

# Logging
LOG_LEVEL = os.getenv("DROPBOX_VFS_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Server
SERVER_HOST = os.getenv("DROPBOX_VFS_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("DROPBOX_VFS_PORT", "8000"))


def setup_logging(log_level: str = LOG_LEVEL) -> None:
    """Configure the root logger for the server process."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # The SDKs are chatty at INFO
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("dropbox").setLevel(logging.WARNING)
