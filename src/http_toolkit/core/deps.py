from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from http_toolkit.application.uploads.use_cases import UploadFilesUseCase
from http_toolkit.core.config import Settings, get_settings
from http_toolkit.domain.files.interfaces import FileStorage
from http_toolkit.infrastructure.files import FilesystemFileStorage, MagicByteSniffer
from http_toolkit.infrastructure.security import random_string


@lru_cache
def get_file_storage() -> FileStorage:
    """
    Singleton file storage instance.
    Swap implementation here without touching use cases.
    """
    return FilesystemFileStorage()


def build_upload_files_use_case(settings: Settings, file_storage: FileStorage | None = None) -> UploadFilesUseCase:
    return UploadFilesUseCase(
        file_storage=file_storage or get_file_storage(),
        sniffer=MagicByteSniffer(),
        name_generator=random_string,
        allowed_file_types=settings.ALLOWED_FILE_TYPES,
    )


def get_upload_files_use_case(
        settings: Annotated[Settings, Depends(get_settings)],
        file_storage: Annotated[FileStorage, Depends(get_file_storage)],
) -> UploadFilesUseCase:
    return build_upload_files_use_case(settings, file_storage)
