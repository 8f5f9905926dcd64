"""On-disk URL cache: one file per resolved URL.

Entries are never expired; an entry is only replaced when a forced reload
writes it again.
"""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class UrlCache:
    """Persistent URL → raw bytes store."""

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def key(url: str) -> str:
        return hashlib.sha256(url.encode("utf-8")).hexdigest()

    def path_for(self, url: str) -> Path:
        return self.cache_dir / f"{self.key(url)}.svg"

    def contains(self, url: str) -> bool:
        return self.path_for(url).is_file()

    def read(self, url: str) -> bytes:
        path = self.path_for(url)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise KeyError(url) from None

    def write(self, url: str, data: bytes) -> None:
        """Store data for url, replacing any existing entry atomically."""
        path = self.path_for(url)
        fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Cached %d bytes for %s → %s", len(data), url, path.name)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and self.contains(url)
