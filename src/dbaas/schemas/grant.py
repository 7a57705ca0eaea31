from pydantic import BaseModel

from .common import APIModel, ServerStatus


class Grant(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    datastore_id: str = ""
    database_id: str = ""
    user_id: str = ""
    status: ServerStatus | None = None


class GrantCreateOpts(BaseModel):
    datastore_id: str
    database_id: str
    user_id: str
