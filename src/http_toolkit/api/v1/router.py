from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from starlette.responses import Response

from http_toolkit.api.downloads import download_static_file
from http_toolkit.api.json_codec import read_json, write_json
from http_toolkit.api.middleware import get_client_ip
from http_toolkit.api.schemas import (
    ClientIPResponse,
    EchoRequest,
    JSONResponse,
    ListUploadedFilesResponse,
    RandomStringResponse,
    SlugResponse,
    UploadedFileResponse,
)
from http_toolkit.api.uploads import upload_files, upload_one_file
from http_toolkit.application.uploads.use_cases import UploadFilesUseCase
from http_toolkit.core.config import Settings, get_settings
from http_toolkit.core.deps import get_upload_files_use_case
from http_toolkit.infrastructure.security import random_string
from http_toolkit.infrastructure.text import slugify

router = APIRouter()

settings_dep = Annotated[Settings, Depends(get_settings)]
upload_files_dep = Annotated[UploadFilesUseCase, Depends(get_upload_files_use_case)]


@router.post("/uploads", response_model=ListUploadedFilesResponse)
async def upload_many(
        request: Request,
        settings: settings_dep,
        use_case: upload_files_dep,
        rename: bool = True,
):
    files = await upload_files(request, settings.UPLOAD_DIR, rename, settings=settings, use_case=use_case)
    return ListUploadedFilesResponse(items=[UploadedFileResponse.model_validate(f) for f in files])


@router.post("/uploads/one", response_model=UploadedFileResponse)
async def upload_single(
        request: Request,
        settings: settings_dep,
        use_case: upload_files_dep,
        rename: bool = True,
):
    uploaded = await upload_one_file(request, settings.UPLOAD_DIR, rename, settings=settings, use_case=use_case)
    return UploadedFileResponse.model_validate(uploaded)


@router.get("/downloads/{file_name}")
def download(file_name: str, settings: settings_dep, display_name: str | None = None):
    return download_static_file(settings.UPLOAD_DIR, file_name, display_name or file_name)


@router.post("/json/echo")
async def echo_json(request: Request, settings: settings_dep) -> Response:
    body = await read_json(request, EchoRequest, settings=settings)
    return write_json(200, JSONResponse(message="ok", data=body), headers={"X-Echoed": "1"})


@router.get("/slugs", response_model=SlugResponse)
def make_slug(text: Annotated[str, Query()] = ""):
    return SlugResponse(slug=slugify(text))


@router.get("/random-string", response_model=RandomStringResponse)
def make_random_string(length: Annotated[int, Query(ge=0, le=4096)] = 25):
    return RandomStringResponse(value=random_string(length))


@router.get("/client-ip", response_model=ClientIPResponse)
def client_ip(request: Request):
    return ClientIPResponse(ip=get_client_ip(request))
