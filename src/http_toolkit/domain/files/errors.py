from __future__ import annotations

from typing import Sequence

from http_toolkit.domain.common.errors import ToolkitError, PayloadTooLarge
from http_toolkit.domain.files.entities import UploadedFile


class UploadError(ToolkitError):
    """Raised when a batch upload stops early.

    `uploaded_files` holds the records persisted before the failure; those
    files are on disk and are not rolled back.
    """

    def __init__(
        self,
        message: str,
        uploaded_files: Sequence[UploadedFile] = (),
        status_code: int | None = None,
    ):
        super().__init__(message, status_code)
        self.uploaded_files: list[UploadedFile] = list(uploaded_files)


class UploadTooLarge(UploadError, PayloadTooLarge):
    status_code = 413

    def __init__(self, max_bytes: int):
        super().__init__("the uploaded file is too big")
        self.max_bytes = max_bytes


class UnsupportedFileType(UploadError):
    status_code = 415

    def __init__(self, content_type: str, uploaded_files: Sequence[UploadedFile] = ()):
        super().__init__("the uploaded file type is not permitted", uploaded_files)
        self.content_type = content_type


class FailedToSaveFile(UploadError):
    status_code = 500


class InvalidMultipartBody(UploadError):
    status_code = 400


class NoFileProvided(UploadError):
    status_code = 400

    def __init__(self):
        super().__init__("no file was provided")


class StaticFileNotFound(ToolkitError):
    status_code = 404

    def __init__(self, file_name: str):
        super().__init__(f"file {file_name} not found")
