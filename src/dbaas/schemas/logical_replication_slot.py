from pydantic import BaseModel

from .common import APIModel, ServerStatus, Status


class LogicalReplicationSlot(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    name: str = ""
    datastore_id: str = ""
    database_id: str = ""
    status: ServerStatus | None = None


class LogicalReplicationSlotCreateOpts(BaseModel):
    name: str
    datastore_id: str
    database_id: str


class LogicalReplicationSlotQueryParams(BaseModel):
    id: str | None = None
    project_id: str | None = None
    name: str | None = None
    datastore_id: str | None = None
    database_id: str | None = None
    status: Status | None = None
