from http_toolkit.infrastructure.files.content_sniffer import MagicByteSniffer, detect_content_type
from http_toolkit.infrastructure.files.filesystem_storage import FilesystemFileStorage, create_dir_if_not_exist

__all__ = ['MagicByteSniffer', 'detect_content_type', 'FilesystemFileStorage', 'create_dir_if_not_exist']
