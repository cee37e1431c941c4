from http_toolkit.domain.common.errors import ToolkitError, PayloadTooLarge


class JSONBodyTooLarge(PayloadTooLarge):
    def __init__(self, max_bytes: int):
        super().__init__(f"body must not be larger than {max_bytes} bytes")
        self.max_bytes = max_bytes


class MalformedJSON(ToolkitError):
    def __init__(self, offset: int | None = None):
        if offset is None:
            super().__init__("body contains badly-formed JSON")
        else:
            super().__init__(f"body contains badly-formed JSON (at character {offset})")
        self.offset = offset


class TypeMismatch(ToolkitError):
    def __init__(self, field: str | None = None, offset: int | None = None):
        if field:
            super().__init__(f'body contains incorrect JSON type for field "{field}"')
        else:
            super().__init__(f"body contains incorrect JSON type (at character {offset})")
        self.field = field
        self.offset = offset


class EmptyBody(ToolkitError):
    def __init__(self):
        super().__init__("body must not be empty")


class UnknownField(ToolkitError):
    def __init__(self, field: str):
        super().__init__(f'body contains unknown key "{field}"')
        self.field = field


class MultipleJSONValues(ToolkitError):
    def __init__(self):
        super().__init__("body must contain only one JSON value")


class DecodeError(ToolkitError):
    """Catch-all for decode faults that have no dedicated error."""
    pass
