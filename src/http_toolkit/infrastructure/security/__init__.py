from http_toolkit.infrastructure.security.random_string import random_string, RANDOM_STRING_SOURCE

__all__ = ['random_string', 'RANDOM_STRING_SOURCE']
