from http_toolkit.application.uploads.dto import UploadFilesInputDTO

__all__ = ['UploadFilesInputDTO']
