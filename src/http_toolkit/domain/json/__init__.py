from http_toolkit.domain.json.errors import (
    JSONBodyTooLarge,
    MalformedJSON,
    TypeMismatch,
    EmptyBody,
    UnknownField,
    MultipleJSONValues,
    DecodeError,
)

__all__ = ['JSONBodyTooLarge', 'MalformedJSON', 'TypeMismatch', 'EmptyBody', 'UnknownField',
           'MultipleJSONValues', 'DecodeError']
