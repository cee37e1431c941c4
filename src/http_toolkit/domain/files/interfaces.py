from pathlib import Path
from typing import Protocol, runtime_checkable

# content sniffers never look past this many leading bytes
SNIFF_LEN = 512


@runtime_checkable
class UploadPart(Protocol):
    """
    A single file part of a multipart body.
    starlette.datastructures.UploadFile satisfies this shape.
    """
    filename: str | None

    async def read(self, size: int = -1) -> bytes:
        ...

    async def seek(self, offset: int) -> None:
        ...

    async def close(self) -> None:
        ...


@runtime_checkable
class FileStorage(Protocol):
    async def save(self, *, directory: Path, filename: str, part: UploadPart) -> int:
        """
        Create directory/filename and stream the whole part into it.
        Returns the number of bytes written.
        """
        ...

    async def ensure_dir(self, path: Path) -> None:
        ...


@runtime_checkable
class ContentSniffer(Protocol):
    def detect(self, data: bytes) -> str:
        ...


@runtime_checkable
class FileNameGenerator(Protocol):
    def __call__(self, length: int) -> str:
        ...
