import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from starlette.responses import PlainTextResponse, Response

from http_toolkit.api.json_codec import error_json
from http_toolkit.domain.common.errors import ToolkitError

logger = logging.getLogger("http_toolkit.errors")


def _plain_error(message: str, status_code: int) -> Response:
    return PlainTextResponse(
        f"{message}\n",
        status_code=status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )


def server_error(err: BaseException) -> Response:
    """Log `err` with its traceback and answer with a generic 500."""
    logger.error("%s", err, exc_info=err)
    return _plain_error(HTTPStatus.INTERNAL_SERVER_ERROR.phrase, status.HTTP_500_INTERNAL_SERVER_ERROR)


def client_error(status_code: int) -> Response:
    return _plain_error(HTTPStatus(status_code).phrase, status_code)


def not_found() -> Response:
    return client_error(status.HTTP_404_NOT_FOUND)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Answer ToolkitError with its own status as a JSON envelope, and anything
    else with a logged 500 envelope. An app that also installs
    RecoverPanicMiddleware (as create_app does) never reaches the second
    handler: the middleware answers unexpected exceptions first.
    """
    @app.exception_handler(ToolkitError)
    async def toolkit_error(_: Request, exc: ToolkitError):
        return error_json(exc, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)
        return error_json(Exception("Internal server error"), status.HTTP_500_INTERNAL_SERVER_ERROR)
