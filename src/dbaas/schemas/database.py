from pydantic import BaseModel

from .common import APIModel, ServerStatus, Status


class Database(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    datastore_id: str = ""
    owner_id: str = ""
    name: str = ""
    lc_collate: str = ""
    lc_ctype: str = ""
    status: ServerStatus | None = None


class DatabaseCreateOpts(BaseModel):
    datastore_id: str
    owner_id: str
    name: str
    lc_collate: str | None = None
    lc_ctype: str | None = None


class DatabaseUpdateOpts(BaseModel):
    owner_id: str


class DatabaseQueryParams(BaseModel):
    id: str | None = None
    project_id: str | None = None
    datastore_id: str | None = None
    owner_id: str | None = None
    name: str | None = None
    status: Status | None = None
