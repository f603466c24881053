"""
Preload pass over the sources an extension declares.

A "module" source is imported, a "file" source has to exist on disk. The
adapter refuses to initialize while any preload fails.
"""

import importlib
import logging
from pathlib import Path
from typing import List, Tuple

from .interface import PreloadSource

logger = logging.getLogger(__name__)


def preload(sources: List[PreloadSource]) -> Tuple[int, List[str]]:
    """
    Load every source in order.

    Args:
        sources: Sources flagged for preloading

    Returns:
        (total, errors) where errors holds one message per failed source
    """
    errors: List[str] = []

    for source in sources:
        if source.type == "module":
            try:
                importlib.import_module(source.src)
                logger.debug(f"Preloaded module: {source.src}")
            except ImportError as e:
                errors.append(f"Failed to load module {source.src}: {e}")
        elif source.type == "file":
            if Path(source.src).is_file():
                logger.debug(f"Preloaded file: {source.src}")
            else:
                errors.append(f"Failed to load file {source.src}")
        else:
            errors.append(f"Unknown preload type '{source.type}' for {source.src}")

    if errors:
        logger.warning(f"Preload finished with {len(errors)} error(s)")
    return len(sources), errors
