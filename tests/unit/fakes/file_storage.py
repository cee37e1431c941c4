from __future__ import annotations

from pathlib import Path
from typing import Dict

from http_toolkit.domain.files.interfaces import UploadPart


class FakeFileStorage:
    """
    In-memory fake implementation of FileStorage for unit tests.
    """

    def __init__(self) -> None:
        # full path -> bytes
        self.files: Dict[str, bytes] = {}
        self.dirs: set[str] = set()

    async def save(self, *, directory: Path, filename: str, part: UploadPart) -> int:
        content = await part.read()
        self.files[str(Path(directory) / filename)] = content
        return len(content)

    async def ensure_dir(self, path: Path) -> None:
        self.dirs.add(str(path))


class FailingOnNthSaveStorage(FakeFileStorage):
    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self._fail_on = fail_on
        self._calls = 0

    async def save(self, *, directory: Path, filename: str, part: UploadPart) -> int:
        self._calls += 1
        if self._calls == self._fail_on:
            raise OSError("disk full")
        return await super().save(directory=directory, filename=filename, part=part)
