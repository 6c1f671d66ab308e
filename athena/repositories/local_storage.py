# -*- coding: utf-8 -*-
"""
Local storage: a small string key/value store on disk.

Each key maps to one UTF-8 text file "<key>.json" inside the storage
directory. Values are opaque strings; callers own their serialization.
"""

import re
from pathlib import Path
from typing import Optional

from athena.app.config import Config
from athena.services.exceptions import StorageException
from athena.utils.logger import get_logger

logger = get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """File-backed key/value storage for a single local process."""

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Args:
            base_dir: Directory holding the key files (default: Config.DATA_DIR)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else Config.DATA_DIR

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.base_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key was never written or cannot be read."""
        path = self._path_for(key)
        if not path.exists():
            return None

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read storage key '{key}' from {path}: {e}")
            return None

    def set_item(self, key: str, value: str) -> None:
        """
        Write the value for a key, replacing any previous value.

        Raises:
            StorageException: if the file cannot be written
        """
        path = self._path_for(key)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding="utf-8")
        except OSError as e:
            raise StorageException(
                f"Failed to write storage key '{key}' to {path}",
                key=key,
                original_error=e
            ) from e

        logger.debug(f"Wrote {len(value)} chars to storage key '{key}'")

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink()

    def has_item(self, key: str) -> bool:
        return self._path_for(key).exists()
