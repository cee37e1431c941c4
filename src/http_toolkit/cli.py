import logging

import uvicorn

from http_toolkit.core.config import get_settings
from http_toolkit.main import create_app


def main(host: str = "0.0.0.0", port: int = 8000) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Starting API on http://localhost:{port}")
    uvicorn.run(create_app(settings), host=host, port=port)


if __name__ == "__main__":
    main()
