from http_toolkit.api.downloads import download_static_file
from http_toolkit.api.errors import client_error, not_found, register_exception_handlers, server_error
from http_toolkit.api.json_codec import error_json, read_json, write_json
from http_toolkit.api.middleware import LogRequestMiddleware, RecoverPanicMiddleware, get_client_ip
from http_toolkit.api.schemas import JSONResponse
from http_toolkit.api.uploads import upload_files, upload_one_file
from http_toolkit.core.config import Settings
from http_toolkit.domain.files import UploadedFile
from http_toolkit.infrastructure.files import create_dir_if_not_exist, detect_content_type
from http_toolkit.infrastructure.security import random_string
from http_toolkit.infrastructure.text import slugify

__all__ = ['download_static_file',
           'client_error',
           'not_found',
           'register_exception_handlers',
           'server_error',
           'error_json',
           'read_json',
           'write_json',
           'LogRequestMiddleware',
           'RecoverPanicMiddleware',
           'get_client_ip',
           'JSONResponse',
           'upload_files',
           'upload_one_file',
           'Settings',
           'UploadedFile',
           'create_dir_if_not_exist',
           'detect_content_type',
           'random_string',
           'slugify']
