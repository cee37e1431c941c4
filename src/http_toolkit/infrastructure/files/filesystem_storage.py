from __future__ import annotations

import logging
from pathlib import Path

import anyio
from anyio import to_thread

from http_toolkit.domain.files.interfaces import UploadPart

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 64 * 1024
DIR_MODE = 0o755


def create_dir_if_not_exist(path: str | Path) -> Path:
    """
    Create `path` and any missing parents with rwxr-xr-x permissions.
    An existing directory is left untouched.
    """
    directory = Path(path)
    directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    return directory


class FilesystemFileStorage:
    def __init__(self, chunk_size: int = COPY_CHUNK_SIZE) -> None:
        self._chunk_size = chunk_size

    async def save(self, *, directory: Path, filename: str, part: UploadPart) -> int:
        # the directory is expected to exist already; a missing one fails on open
        full_path = Path(directory) / filename
        written = 0
        async with await anyio.open_file(full_path, "wb") as out:
            while True:
                chunk = await part.read(self._chunk_size)
                if not chunk:
                    break
                await out.write(chunk)
                written += len(chunk)

        logger.debug("Wrote %d bytes to %s", written, full_path)
        return written

    async def ensure_dir(self, path: Path) -> None:
        await to_thread.run_sync(create_dir_if_not_exist, path)
