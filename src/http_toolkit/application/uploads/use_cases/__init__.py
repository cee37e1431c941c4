from http_toolkit.application.uploads.use_cases.upload_files import UploadFilesUseCase
from http_toolkit.application.uploads.use_cases.upload_one_file import UploadOneFileUseCase

__all__ = ['UploadFilesUseCase', 'UploadOneFileUseCase']
