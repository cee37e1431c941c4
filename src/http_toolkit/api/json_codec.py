from __future__ import annotations

import json
import re
import types
from collections.abc import Mapping as MappingABC, Sequence as SequenceABC
from typing import Annotated, Any, Mapping, Sequence, TypeVar, Union, get_args, get_origin

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo
from starlette.requests import Request
from starlette.responses import Response

from http_toolkit.api.schemas import JSONResponse
from http_toolkit.core.config import Settings, get_settings
from http_toolkit.domain.json import (
    DecodeError,
    EmptyBody,
    JSONBodyTooLarge,
    MalformedJSON,
    MultipleJSONValues,
    TypeMismatch,
    UnknownField,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

HeaderValue = str | Sequence[str]

_WS = " \t\n\r"

# a JSON string, or one of the constants Python's decoder accepts but JSON does not
_STRING_OR_CONSTANT = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)', re.DOTALL)


class _NonStandardConstant(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    raise _NonStandardConstant(name)


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


async def _read_body(request: Request, max_bytes: int) -> bytes:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise JSONBodyTooLarge(max_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise JSONBodyTooLarge(max_bytes)
    return bytes(body)


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WS:
        pos += 1
    return pos


def _fields_by_key(model: type[BaseModel]) -> dict[str, FieldInfo]:
    keys: dict[str, FieldInfo] = {}
    for name, field in model.model_fields.items():
        keys[name] = field
        if field.alias:
            keys[field.alias] = field
        if isinstance(field.validation_alias, str):
            keys[field.validation_alias] = field
    return keys


def _join(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def _unknown_key(value: Any, annotation: Any, path: str = "") -> str | None:
    """
    Dotted path of the first key in `value` that `annotation` has no field
    for, descending into nested models, containers of models and unions.
    """
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        if not isinstance(value, dict) or annotation.model_config.get("extra") == "allow":
            return None
        fields = _fields_by_key(annotation)
        for key, item in value.items():
            if key not in fields:
                return _join(path, key)
            found = _unknown_key(item, fields[key].annotation, _join(path, key))
            if found:
                return found
        return None

    origin = get_origin(annotation)
    args = get_args(annotation)
    if not args:
        return None
    if origin is Annotated:
        return _unknown_key(value, args[0], path)
    if isinstance(origin, type) and issubclass(origin, MappingABC):
        if isinstance(value, dict) and len(args) == 2:
            for key, item in value.items():
                found = _unknown_key(item, args[1], _join(path, key))
                if found:
                    return found
        return None
    if isinstance(origin, type) and issubclass(origin, (SequenceABC, set, frozenset)):
        if isinstance(value, list):
            for i, item in enumerate(value):
                found = _unknown_key(item, args[0], _join(path, i))
                if found:
                    return found
        return None

    if origin is Union or origin is types.UnionType:
        # unknown only if no member of the union knows the key
        results = [_unknown_key(value, a, path) for a in args if a is not type(None)]
        if results and all(results):
            return results[0]
    return None


def _constant_offset(text: str, start: int) -> int | None:
    for m in _STRING_OR_CONSTANT.finditer(text, start):
        if m.group(1):
            return m.start(1)
    return None


def _decode_first_value(text: str) -> tuple[Any, int, int]:
    """Returns (value, start offset, end offset) of the first JSON value."""
    start = _skip_ws(text, 0)
    try:
        value, end = _decoder.raw_decode(text, start)
    except _NonStandardConstant as e:
        raise MalformedJSON(offset=_constant_offset(text, start)) from e
    except json.JSONDecodeError as e:
        # an error at the very end of the input means the body was cut short
        if e.pos >= len(text.rstrip(_WS)) or e.msg.startswith("Unterminated string"):
            raise MalformedJSON() from e
        raise MalformedJSON(offset=e.pos) from e
    return value, start, end


def _classify_validation_error(e: ValidationError, offset: int) -> Exception:
    err = e.errors()[0]
    kind = err["type"]
    field = ".".join(str(p) for p in err["loc"])

    if kind == "extra_forbidden":
        return UnknownField(field)
    # strict mode reports e.g. int_from_float for a fractional number
    if kind.endswith(("_type", "_parsing")) or "_from_" in kind:
        if field:
            return TypeMismatch(field=field)
        return TypeMismatch(offset=offset)
    if kind == "missing":
        return DecodeError(f'body is missing required field "{field}"')
    if field:
        return DecodeError(f'field "{field}": {err["msg"]}')
    return DecodeError(err["msg"])


async def read_json(request: Request, model: type[ModelT], *, settings: Settings | None = None) -> ModelT:
    """
    Decode exactly one JSON value from the request body into `model`.

    The body is capped at MAX_JSON_SIZE while it is read. Keys that are not
    fields of `model` or of the models nested in it are rejected unless
    ALLOW_UNKNOWN_FIELDS is set. Validation is strict: a JSON value of the
    wrong type is never coerced. Every failure is raised as one of the errors
    in http_toolkit.domain.json.
    """
    settings = settings or get_settings()
    max_bytes = settings.effective_max_json_size()

    body = await _read_body(request, max_bytes)
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedJSON(offset=e.start) from e

    if not text.strip(_WS):
        raise EmptyBody()

    value, start, end = _decode_first_value(text)

    if not settings.ALLOW_UNKNOWN_FIELDS:
        unknown = _unknown_key(value, model)
        if unknown:
            raise UnknownField(unknown)

    try:
        result = model.model_validate_json(text[start:end], strict=True)
    except ValidationError as e:
        raise _classify_validation_error(e, start) from e

    if _skip_ws(text, end) != len(text):
        raise MultipleJSONValues()

    return result


def write_json(status: int, payload: Any, headers: Mapping[str, HeaderValue] | None = None) -> Response:
    """
    Build a JSON response. Serialisation happens first; if it fails the
    error propagates and no response exists. Caller headers replace existing
    ones of the same name; Content-Type is always application/json.
    """
    out = json.dumps(
        jsonable_encoder(payload),
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    ).encode("utf-8")

    response = Response(content=out, status_code=status)
    for name, value in (headers or {}).items():
        if isinstance(value, str):
            response.headers[name] = value
        else:
            del response.headers[name]
            for v in value:
                response.headers.append(name, v)
    response.headers["content-type"] = "application/json"
    return response


def error_json(err: BaseException, status: int = 400) -> Response:
    payload = JSONResponse(error=True, message=str(err))
    return write_json(status, payload)
