from http_toolkit.domain.common.errors import ToolkitError


class EmptyInput(ToolkitError):
    def __init__(self):
        super().__init__("empty string not permitted")


class EmptySlug(ToolkitError):
    def __init__(self):
        super().__init__("after removing characters, slug is zero length")
