from pydantic import BaseModel

from .common import APIModel, ServerStatus


class User(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    datastore_id: str = ""
    name: str = ""
    status: ServerStatus | None = None


class UserCreateOpts(BaseModel):
    datastore_id: str
    name: str
    password: str


class UserUpdateOpts(BaseModel):
    password: str
