from http_toolkit.core.config import Settings, settings, get_settings
from http_toolkit.core.deps import get_file_storage, get_upload_files_use_case

__all__ = ['Settings',
           'settings',
           'get_settings',
           'get_file_storage',
           'get_upload_files_use_case']
