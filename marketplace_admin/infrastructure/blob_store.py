"""Local Blob Store — BlobStore protocol over a directory on disk.

Invariants:
    - upload(path, data) writes exactly data to <root>/<path> and returns <base_url>/<path>
    - Paths never escape root (absolute paths and ".." segments are rejected)
    - OS failures surface as BlobStorageError; nothing is retried

Design Decisions:
    - Blocking file writes run in a worker thread (asyncio.to_thread) so the event loop stays free
"""

import asyncio
import logging
from pathlib import Path, PurePosixPath

from marketplace_admin.core.errors import BlobStorageError

logger = logging.getLogger(__name__)


class LocalBlobStore:
    def __init__(self, root: str | Path, public_base_url: str):
        self.root = Path(root)
        self.public_base_url = public_base_url.rstrip("/")

    def _target(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts or not relative.parts:
            raise BlobStorageError(path)
        return self.root.joinpath(*relative.parts)

    async def upload(self, path: str, data: bytes) -> str:
        target = self._target(path)
        try:
            await asyncio.to_thread(_write_bytes, target, data)
        except OSError as e:
            logger.error(f"Blob upload failed for {path}: {e}")
            raise BlobStorageError(path) from e
        logger.info(f"Uploaded {len(data)} bytes to {path}")
        return f"{self.public_base_url}/{PurePosixPath(path).as_posix()}"


def _write_bytes(target: Path, data: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
