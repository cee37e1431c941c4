from __future__ import annotations

from pathlib import Path

from starlette.responses import FileResponse

from http_toolkit.domain.files import StaticFileNotFound


def download_static_file(directory: str | Path, file_name: str, display_name: str) -> FileResponse:
    """
    Serve directory/file_name as an attachment the client saves as
    `display_name`.
    """
    root = Path(directory).resolve()
    full_path = (root / file_name).resolve()
    # refuse anything that resolves outside the directory
    if not full_path.is_relative_to(root) or not full_path.is_file():
        raise StaticFileNotFound(file_name)

    return FileResponse(
        full_path,
        headers={"Content-Disposition": f'attachment; filename="{display_name}"'},
    )
