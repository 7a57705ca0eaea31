from pydantic import BaseModel, Field

from .common import APIModel, ServerStatus, Status


class ACL(APIModel):
    """Kafka access rule for a user on a topic pattern."""

    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    datastore_id: str = ""
    pattern: str = ""
    pattern_type: str = Field("", description="e.g., prefixed, literal, all")
    user_id: str = ""
    status: ServerStatus | None = None
    allow_read: bool = False
    allow_write: bool = False


class ACLCreateOpts(BaseModel):
    datastore_id: str
    pattern_type: str
    user_id: str
    allow_read: bool
    allow_write: bool
    pattern: str | None = None


class ACLUpdateOpts(BaseModel):
    allow_read: bool
    allow_write: bool


class ACLQueryParams(BaseModel):
    id: str | None = None
    project_id: str | None = None
    datastore_id: str | None = None
    pattern: str | None = None
    pattern_type: str | None = None
    user_id: str | None = None
    status: Status | None = None
