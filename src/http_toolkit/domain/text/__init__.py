from http_toolkit.domain.text.errors import EmptyInput, EmptySlug

__all__ = ['EmptyInput', 'EmptySlug']
