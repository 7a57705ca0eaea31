from ..clients import DBaaSAPI
from ..core import USERS_URI
from ..encoding import decode_many, decode_one
from ..schemas.user import User, UserCreateOpts, UserUpdateOpts


def list_users(api: DBaaSAPI) -> list[User]:
    resp = api.make_request("GET", USERS_URI)
    return decode_many(resp, "users", User)


def get_user(api: DBaaSAPI, user_id: str) -> User:
    resp = api.make_request("GET", f"{USERS_URI}/{user_id}")
    return decode_one(resp, "user", User)


def create_user(api: DBaaSAPI, opts: UserCreateOpts) -> User:
    resp = api.make_request("POST", USERS_URI, {"user": opts})
    return decode_one(resp, "user", User)


def update_user(api: DBaaSAPI, user_id: str, opts: UserUpdateOpts) -> User:
    """Sets a new password for an existing user."""
    resp = api.make_request("PUT", f"{USERS_URI}/{user_id}", {"user": opts})
    return decode_one(resp, "user", User)


def delete_user(api: DBaaSAPI, user_id: str) -> None:
    api.make_request("DELETE", f"{USERS_URI}/{user_id}")
