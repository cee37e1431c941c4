from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from http_toolkit.api.errors import register_exception_handlers
from http_toolkit.api.middleware import LogRequestMiddleware, RecoverPanicMiddleware
from http_toolkit.api.v1.router import router as api_router
from http_toolkit.core.config import Settings, get_settings
from http_toolkit.core.deps import get_file_storage


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await get_file_storage().ensure_dir(Path(settings.UPLOAD_DIR))
        yield

    app = FastAPI(lifespan=lifespan)
    app.dependency_overrides[get_settings] = lambda: settings
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # added last so it runs first
    app.add_middleware(RecoverPanicMiddleware)
    app.add_middleware(LogRequestMiddleware)
    register_exception_handlers(app)
    return app
