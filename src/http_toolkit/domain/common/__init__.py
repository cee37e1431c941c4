from http_toolkit.domain.common.errors import ToolkitError, PayloadTooLarge

__all__ = ['ToolkitError', 'PayloadTooLarge']
