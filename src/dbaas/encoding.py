from __future__ import annotations

import json
import math
import re
from typing import Any, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Values datastore configuration parameters may take once coerced
ConfigValue = int | float | bool | str

_INT_RE = re.compile(r"[+-]?[0-9]+")
_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def handle_params(params: Any) -> bytes | None:
    """
    Turns a request payload into the JSON body to send.

    Bytes are sent as they are, pydantic models are dumped without their
    unset optional fields and anything else goes through json.dumps.
    """
    if params is None:
        return None
    if isinstance(params, bytes):
        return params
    if isinstance(params, BaseModel):
        return params.model_dump_json(exclude_none=True).encode()
    return json.dumps(_jsonable(params)).encode()


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def set_query_params(uri: str, params: BaseModel | None) -> str:
    """
    Appends the non-zero fields of `params` to `uri` as a query string.

    Unset fields and zero values ("", 0, False) are left out, so a filter
    cannot ask for e.g. enabled=false through this path.
    """
    if params is None:
        return uri

    values = params.model_dump(mode="json", exclude_none=True)
    query = sorted(
        (key, _format_query_value(value)) for key, value in values.items() if value
    )
    if not query:
        return uri

    return f"{uri}?{urlencode(query)}"


def coerce_config_value(value: Any) -> Any:
    """
    Best-effort typing of a configuration value.

    Strings are tried as int, then float, then bool, and kept as strings
    if none of those parse. Anything that is not a string is returned
    unchanged. "1" therefore always becomes the integer 1.
    """
    if not isinstance(value, str):
        return value
    return _coerce_string(value)


def _coerce_string(value: str) -> ConfigValue:
    if _INT_RE.fullmatch(value):
        return int(value)

    # float() also accepts whitespace, digit separators, inf and nan; the API does not
    if value == value.strip() and "_" not in value:
        try:
            number = float(value)
        except ValueError:
            pass
        else:
            if math.isfinite(number):
                return number

    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False

    return value


def convert_config_values(config: dict[str, Any] | None) -> dict[str, Any]:
    if not config:
        return {}
    return {name: coerce_config_value(value) for name, value in config.items()}


def _load(body: bytes, key: str, allow_bare: bool = False) -> Any:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"error during unmarshal of '{key}' response, {e}") from e

    if isinstance(data, dict):
        if key in data:
            return data[key]
        if allow_bare:
            return data

    raise DecodeError(f"response has no '{key}' envelope")


def decode_one(
    body: bytes, key: str, model: type[ModelT], allow_bare: bool = False
) -> ModelT:
    """
    Unwraps `{key: {...}}` into `model`.

    With allow_bare a body that is the object itself is accepted too.
    """
    payload = _load(body, key, allow_bare)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"error during unmarshal of '{key}', {e}") from e


def decode_many(body: bytes, key: str, model: type[ModelT]) -> list[ModelT]:
    """Unwraps `{key: [...]}` into a list of `model`."""
    payload = _load(body, key)
    if payload is None:
        return []
    try:
        return TypeAdapter(list[model]).validate_python(payload)  # type: ignore[valid-type]
    except ValidationError as e:
        raise DecodeError(f"error during unmarshal of '{key}', {e}") from e
