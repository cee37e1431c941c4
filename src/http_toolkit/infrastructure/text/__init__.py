from http_toolkit.infrastructure.text.slugify import slugify

__all__ = ['slugify']
