from __future__ import annotations

import os

import pytest

import starlette.formparsers

from http_toolkit.api.uploads import BodyLimitExceeded, LimitedReceive, open_upload_parts
from http_toolkit.domain.files import UploadTooLarge

from tests.unit.fakes.requests import make_request
from tests.unit.fakes.samples import PDF_BYTES, PNG_BYTES


def _files(*names_and_bodies):
    return [("file", (name, body, "application/octet-stream")) for name, body in names_and_bodies]


def test_upload_many_renames_and_stores(client, upload_dir):
    response = client.post("/api/v1/uploads", files=_files(("cat.png", PNG_BYTES), ("doc.pdf", PDF_BYTES)))

    assert response.status_code == 200
    items = response.json()["items"]
    assert [i["original_file_name"] for i in items] == ["cat.png", "doc.pdf"]
    for item in items:
        assert len(item["new_file_name"]) == 25 + len(os.path.splitext(item["original_file_name"])[1])
        assert item["new_file_name"] != item["original_file_name"]

    assert (upload_dir / items[0]["new_file_name"]).read_bytes() == PNG_BYTES
    assert items[1]["file_size"] == len(PDF_BYTES)


def test_upload_parts_under_any_field_name(client, upload_dir):
    files = [
        ("avatar", ("a.png", PNG_BYTES, "image/png")),
        ("attachment", ("b.pdf", PDF_BYTES, "application/pdf")),
    ]

    response = client.post("/api/v1/uploads", params={"rename": "false"}, files=files)

    assert response.status_code == 200
    assert sorted(p.name for p in upload_dir.iterdir()) == ["a.png", "b.pdf"]


def test_upload_rejects_type_outside_allow_list(make_client, upload_dir):
    client = make_client(ALLOWED_FILE_TYPES=["image/png"])

    response = client.post("/api/v1/uploads", files=_files(("doc.pdf", PDF_BYTES)))

    assert response.status_code == 415
    assert response.json() == {"error": True, "message": "the uploaded file type is not permitted"}
    assert list(upload_dir.iterdir()) == []


def test_upload_partial_failure_leaves_earlier_files(make_client, upload_dir):
    client = make_client(ALLOWED_FILE_TYPES=["image/png"])

    response = client.post(
        "/api/v1/uploads",
        params={"rename": "false"},
        files=_files(("first.png", PNG_BYTES), ("second.pdf", PDF_BYTES), ("third.png", PNG_BYTES)),
    )

    assert response.status_code == 415
    # no rollback of what was already written
    assert [p.name for p in upload_dir.iterdir()] == ["first.png"]


def test_upload_too_large(make_client, upload_dir):
    client = make_client(MAX_FILE_SIZE=256)

    response = client.post("/api/v1/uploads", files=_files(("big.bin", b"\x00" * 4096)))

    assert response.status_code == 413
    assert response.json()["message"] == "the uploaded file is too big"
    assert list(upload_dir.iterdir()) == []


def test_upload_invalid_multipart_body(client):
    response = client.post(
        "/api/v1/uploads",
        content=b"not a multipart body",
        headers={"Content-Type": "multipart/form-data"},
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("could not parse multipart body")


def test_upload_into_missing_directory_is_server_error(make_client, tmp_path):
    client = make_client(UPLOAD_DIR=str(tmp_path / "missing"))

    response = client.post("/api/v1/uploads", files=_files(("cat.png", PNG_BYTES)))

    assert response.status_code == 500
    assert response.json()["error"] is True


def test_upload_one_returns_first_file(client, upload_dir):
    response = client.post(
        "/api/v1/uploads/one",
        params={"rename": "false"},
        files=_files(("cat.png", PNG_BYTES), ("doc.pdf", PDF_BYTES)),
    )

    assert response.status_code == 200
    assert response.json() == {
        "new_file_name": "cat.png",
        "original_file_name": "cat.png",
        "file_size": len(PNG_BYTES),
    }


def test_upload_one_without_file(client):
    response = client.post("/api/v1/uploads/one", data={"note": "no file here"})

    assert response.status_code == 400
    assert response.json() == {"error": True, "message": "no file was provided"}


@pytest.mark.asyncio
async def test_limited_receive_counts_streamed_chunks():
    messages = [
        {"type": "http.request", "body": b"a" * 6, "more_body": True},
        {"type": "http.request", "body": b"a" * 6, "more_body": False},
    ]

    async def receive():
        return messages.pop(0)

    limited = LimitedReceive(receive, max_bytes=10)
    await limited()
    assert limited.received == 6

    with pytest.raises(BodyLimitExceeded):
        await limited()
    assert limited.exceeded is True


@pytest.mark.asyncio
async def test_body_over_cap_mid_stream_closes_spooled_parts(monkeypatch):
    spooled = []

    class RecordingSpool(starlette.formparsers.SpooledTemporaryFile):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            spooled.append(self)

    monkeypatch.setattr(starlette.formparsers, "SpooledTemporaryFile", RecordingSpool)

    body = (
        b"--XBOUNDARY\r\n"
        b'Content-Disposition: form-data; name="file"; filename="big.bin"\r\n'
        b"Content-Type: application/octet-stream\r\n\r\n"
        + b"a" * 400
        + b"\r\n--XBOUNDARY--\r\n"
    )
    # no Content-Length, so only the streaming cap can stop it
    request = make_request(
        body,
        headers={"Content-Type": "multipart/form-data; boundary=XBOUNDARY"},
        chunk_size=64,
    )

    with pytest.raises(UploadTooLarge):
        async with open_upload_parts(request, max_bytes=256):
            pass

    assert spooled, "the file part should have been spooled before the cap was hit"
    assert all(f.closed for f in spooled)
