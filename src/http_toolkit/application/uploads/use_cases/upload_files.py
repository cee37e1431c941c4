from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from http_toolkit.application.uploads.dto import UploadFilesInputDTO
from http_toolkit.domain.files.entities import UploadedFile
from http_toolkit.domain.files.errors import FailedToSaveFile, UnsupportedFileType, UploadError
from http_toolkit.domain.files.interfaces import SNIFF_LEN, ContentSniffer, FileNameGenerator, FileStorage, UploadPart

logger = logging.getLogger(__name__)

RANDOM_NAME_LENGTH = 25


class UploadFilesUseCase:
    def __init__(
        self,
        file_storage: FileStorage,
        sniffer: ContentSniffer,
        name_generator: FileNameGenerator,
        allowed_file_types: Iterable[str] = (),
    ) -> None:
        self._file_storage = file_storage
        self._sniffer = sniffer
        self._name_generator = name_generator
        self._allowed = {t.casefold() for t in allowed_file_types}

    async def execute(self, dto: UploadFilesInputDTO) -> list[UploadedFile]:
        uploaded: list[UploadedFile] = []
        for part in dto.parts:
            try:
                uploaded.append(await self._store_part(part, dto.upload_dir, dto.rename))
            except UploadError as e:
                # files already written stay on disk and are reported back
                e.uploaded_files = list(uploaded)
                logger.warning("Upload stopped after %d file(s): %s", len(uploaded), e)
                raise
            finally:
                await part.close()
        return uploaded

    async def _store_part(self, part: UploadPart, upload_dir: Path, rename: bool) -> UploadedFile:
        original_name = part.filename or ""

        try:
            head = await part.read(SNIFF_LEN)
        except Exception as e:
            raise FailedToSaveFile(f"could not read uploaded file {original_name}") from e

        content_type = self._sniffer.detect(head)
        if not self._is_allowed(content_type):
            raise UnsupportedFileType(content_type)

        try:
            await part.seek(0)
        except Exception as e:
            raise FailedToSaveFile(f"could not rewind uploaded file {original_name}") from e

        if rename:
            new_name = f"{self._name_generator(RANDOM_NAME_LENGTH)}{Path(original_name).suffix}"
        else:
            new_name = original_name

        try:
            size = await self._file_storage.save(directory=upload_dir, filename=new_name, part=part)
        except OSError as e:
            raise FailedToSaveFile(f"could not save uploaded file {original_name}") from e

        logger.debug("Stored %s as %s (%d bytes, %s)", original_name, new_name, size, content_type)
        return UploadedFile(
            new_file_name=new_name,
            original_file_name=original_name,
            file_size=size,
        )

    def _is_allowed(self, content_type: str) -> bool:
        # an empty allow-list accepts everything
        if not self._allowed:
            return True
        return content_type.casefold() in self._allowed
