from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, Field, model_validator


class Status(str, Enum):
    """Lifecycle states reported by the API for its objects."""

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"
    DEGRADED = "DEGRADED"
    DISK_FULL = "DISK_FULL"
    ERROR = "ERROR"
    PENDING_CREATE = "PENDING_CREATE"
    PENDING_UPDATE = "PENDING_UPDATE"
    PENDING_DELETE = "PENDING_DELETE"
    DOWN = "DOWN"
    RESIZING = "RESIZING"


# Known states parse to Status, states this client does not know yet stay plain strings
ServerStatus = Annotated[Status | str, Field(union_mode="left_to_right")]


class DiskType(str, Enum):
    LOCAL = "local"
    NETWORK_ULTRA = "network-ultra"


class APIModel(BaseModel):
    """
    Base for models decoded from API responses.

    A JSON null falls back to the field default, so `"name": null` reads
    as "" and `"flavor": null` as None.
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class APIErrorDetail(APIModel):
    code: int
    title: str = ""
    message: str = ""


class APIErrorBody(BaseModel):
    error: APIErrorDetail
