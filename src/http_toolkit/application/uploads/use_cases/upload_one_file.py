from __future__ import annotations

from http_toolkit.application.uploads.dto import UploadFilesInputDTO
from http_toolkit.application.uploads.use_cases.upload_files import UploadFilesUseCase
from http_toolkit.domain.files.entities import UploadedFile
from http_toolkit.domain.files.errors import NoFileProvided


class UploadOneFileUseCase:
    def __init__(self, upload_files: UploadFilesUseCase) -> None:
        self._upload_files = upload_files

    async def execute(self, dto: UploadFilesInputDTO) -> UploadedFile:
        files = await self._upload_files.execute(dto)
        if not files:
            raise NoFileProvided()
        return files[0]
