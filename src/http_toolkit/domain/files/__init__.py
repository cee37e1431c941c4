from http_toolkit.domain.files.entities import UploadedFile
from http_toolkit.domain.files.errors import (
    UploadError,
    UploadTooLarge,
    UnsupportedFileType,
    FailedToSaveFile,
    InvalidMultipartBody,
    NoFileProvided,
    StaticFileNotFound,
)

__all__ = ['UploadedFile', 'UploadError', 'UploadTooLarge', 'UnsupportedFileType', 'FailedToSaveFile',
           'InvalidMultipartBody', 'NoFileProvided', 'StaticFileNotFound']
