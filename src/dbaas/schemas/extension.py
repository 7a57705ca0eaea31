from pydantic import BaseModel, Field

from .common import APIModel, ServerStatus, Status


class Extension(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    available_extension_id: str = ""
    datastore_id: str = ""
    database_id: str = ""
    status: ServerStatus | None = None


class ExtensionCreateOpts(BaseModel):
    available_extension_id: str
    datastore_id: str
    database_id: str


class ExtensionQueryParams(BaseModel):
    id: str | None = None
    project_id: str | None = None
    available_extension_id: str | None = None
    datastore_id: str | None = None
    database_id: str | None = None
    status: Status | None = None


class AvailableExtension(APIModel):
    """An extension that can be installed into databases of some datastore types."""

    id: str
    name: str = ""
    datastore_type_ids: list[str] = Field(default_factory=list)
    dependency_ids: list[str] = Field(default_factory=list)
