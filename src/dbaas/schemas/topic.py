from pydantic import BaseModel, Field

from .common import APIModel, ServerStatus, Status


class Topic(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    datastore_id: str = ""
    name: str = ""
    status: ServerStatus | None = None
    partitions: int = Field(0, ge=0, le=65535)


class TopicCreateOpts(BaseModel):
    datastore_id: str
    name: str
    partitions: int = Field(ge=0, le=65535)


class TopicUpdateOpts(BaseModel):
    partitions: int = Field(ge=0, le=65535)


class TopicQueryParams(BaseModel):
    id: str | None = None
    project_id: str | None = None
    datastore_id: str | None = None
    name: str | None = None
    status: Status | None = None
