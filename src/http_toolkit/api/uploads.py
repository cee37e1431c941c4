from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request
from starlette.types import Message, Receive

from http_toolkit.application.uploads.dto import UploadFilesInputDTO
from http_toolkit.application.uploads.use_cases import UploadFilesUseCase, UploadOneFileUseCase
from http_toolkit.core.config import Settings, get_settings
from http_toolkit.core.deps import build_upload_files_use_case
from http_toolkit.domain.files import InvalidMultipartBody, UploadedFile, UploadTooLarge

logger = logging.getLogger(__name__)


class BodyLimitExceeded(MultiPartException):
    """
    Raised from inside the form parser when the body passes the cap. It is a
    MultiPartException so Starlette closes the parts it has spooled so far.
    """


class LimitedReceive:
    """
    ASGI receive wrapper that fails as soon as more than `max_bytes` of body
    have arrived, so the cap holds regardless of the declared Content-Length.
    """

    def __init__(self, receive: Receive, max_bytes: int) -> None:
        self._receive = receive
        self._max_bytes = max_bytes
        self.received = 0
        self.exceeded = False

    async def __call__(self) -> Message:
        message = await self._receive()
        if message["type"] == "http.request":
            self.received += len(message.get("body", b""))
            if self.received > self._max_bytes:
                self.exceeded = True
                raise BodyLimitExceeded(f"body exceeded {self._max_bytes} bytes")
        return message


def _check_declared_length(request: Request, max_bytes: int) -> None:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise UploadTooLarge(max_bytes)


@asynccontextmanager
async def open_upload_parts(request: Request, max_bytes: int) -> AsyncIterator[list[UploadFile]]:
    """
    Parse the multipart body with a hard size cap and yield every file part,
    whatever field it was sent under. All parts are closed on exit.
    """
    _check_declared_length(request, max_bytes)
    receive = LimitedReceive(request.receive, max_bytes)
    limited = Request(request.scope, receive=receive)
    try:
        form = await limited.form()
    except (MultiPartException, HTTPException) as e:
        # Starlette turns parser errors into a 400 HTTPException inside an app
        if receive.exceeded:
            raise UploadTooLarge(max_bytes) from e
        detail = getattr(e, "message", None) or getattr(e, "detail", None) or str(e)
        raise InvalidMultipartBody(f"could not parse multipart body: {detail}") from e

    try:
        yield [value for _, value in form.multi_items() if isinstance(value, UploadFile)]
    finally:
        await form.close()


async def upload_files(
        request: Request,
        upload_dir: str | Path,
        rename: bool = True,
        *,
        settings: Settings | None = None,
        use_case: UploadFilesUseCase | None = None,
) -> list[UploadedFile]:
    """
    Store every file of a multipart request in `upload_dir`.

    On failure the raised UploadError carries `uploaded_files`: the files
    written before the failing one. They are left on disk.
    """
    settings = settings or get_settings()
    use_case = use_case or build_upload_files_use_case(settings)

    async with open_upload_parts(request, settings.effective_max_file_size()) as parts:
        dto = UploadFilesInputDTO(parts=parts, upload_dir=Path(upload_dir), rename=rename)
        files = await use_case.execute(dto)

    logger.info("Uploaded %d file(s) to %s", len(files), upload_dir)
    return files


async def upload_one_file(
        request: Request,
        upload_dir: str | Path,
        rename: bool = True,
        *,
        settings: Settings | None = None,
        use_case: UploadFilesUseCase | None = None,
) -> UploadedFile:
    settings = settings or get_settings()
    use_case = use_case or build_upload_files_use_case(settings)

    async with open_upload_parts(request, settings.effective_max_file_size()) as parts:
        dto = UploadFilesInputDTO(parts=parts, upload_dir=Path(upload_dir), rename=rename)
        return await UploadOneFileUseCase(use_case).execute(dto)
