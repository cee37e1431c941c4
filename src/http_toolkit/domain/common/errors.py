class ToolkitError(Exception):
    """Base class for every error raised by the toolkit helpers.

    `status_code` is the HTTP status a handler should answer with when the
    error reaches the client.
    """
    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class PayloadTooLarge(ToolkitError):
    status_code = 413
