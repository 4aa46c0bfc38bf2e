"""Local file store for flower images.

Files are addressed by a relative path (``{flower_id}/{image_id}{ext}``) and
live under a single root directory, configured through
``FLOWERSHOP_STORAGE_ROOT``.
"""

import os
from pathlib import Path

from flowershop.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_ROOT = "storage"


class StorageError(Exception):
    """Raised when a path cannot be served by the file store."""


class LocalFileStorage:
    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()

    @classmethod
    def from_env(cls) -> "LocalFileStorage":
        return cls(os.getenv("FLOWERSHOP_STORAGE_ROOT", DEFAULT_STORAGE_ROOT))

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if not target.is_relative_to(self.root):
            raise StorageError(f"Path {path!r} escapes the storage root")
        return target

    def upload(self, content: bytes, path: str) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        logger.debug("file_stored", path=path, size=len(content))

    def delete(self, path: str) -> None:
        """Remove a stored file. Missing files are ignored."""
        target = self._resolve(path)
        target.unlink(missing_ok=True)
        logger.debug("file_deleted", path=path)

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()


def file_storage() -> LocalFileStorage:
    return LocalFileStorage.from_env()
