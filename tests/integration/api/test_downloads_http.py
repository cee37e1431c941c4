from __future__ import annotations

import pytest

from http_toolkit.api.downloads import download_static_file
from http_toolkit.domain.files import StaticFileNotFound


def test_download_sets_attachment_header(client, upload_dir):
    (upload_dir / "report-2024.txt").write_bytes(b"quarterly numbers")

    response = client.get("/api/v1/downloads/report-2024.txt", params={"display_name": "Report.txt"})

    assert response.status_code == 200
    assert response.content == b"quarterly numbers"
    assert response.headers["content-disposition"] == 'attachment; filename="Report.txt"'


def test_download_defaults_display_name_to_file_name(client, upload_dir):
    (upload_dir / "notes.txt").write_text("hi")

    response = client.get("/api/v1/downloads/notes.txt")

    assert response.headers["content-disposition"] == 'attachment; filename="notes.txt"'


def test_download_missing_file(client):
    response = client.get("/api/v1/downloads/nope.txt")

    assert response.status_code == 404
    assert response.json() == {"error": True, "message": "file nope.txt not found"}


def test_download_refuses_paths_outside_directory(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (tmp_path / "secret.txt").write_text("do not serve")

    with pytest.raises(StaticFileNotFound):
        download_static_file(public, "../secret.txt", "secret.txt")


def test_download_refuses_directories(tmp_path):
    (tmp_path / "sub").mkdir()

    with pytest.raises(StaticFileNotFound):
        download_static_file(tmp_path, "sub", "sub")
