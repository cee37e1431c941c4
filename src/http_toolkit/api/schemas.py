from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class JSONResponse(BaseModel):
    """
    Uniform envelope for JSON replies. `data` is left out of the serialised
    output when it is None.
    """
    error: bool = False
    message: str = ""
    data: Any = None

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="wrap")
    def _omit_empty_data(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        out = handler(self)
        if out.get("data") is None:
            out.pop("data", None)
        return out


class UploadedFileResponse(BaseModel):
    new_file_name: str
    original_file_name: str
    file_size: int

    model_config = ConfigDict(from_attributes=True)


class ListUploadedFilesResponse(BaseModel):
    items: list[UploadedFileResponse]


class SlugResponse(BaseModel):
    slug: str


class RandomStringResponse(BaseModel):
    value: str


class ClientIPResponse(BaseModel):
    ip: str


class EchoRequest(BaseModel):
    """Body accepted by the JSON echo endpoint."""
    name: str
    tags: list[str] = []
