from ..clients import DBaaSAPI
from ..core import DATABASES_URI
from ..encoding import decode_many, decode_one, set_query_params
from ..schemas.database import (
    Database,
    DatabaseCreateOpts,
    DatabaseQueryParams,
    DatabaseUpdateOpts,
)


def list_databases(
    api: DBaaSAPI, params: DatabaseQueryParams | None = None
) -> list[Database]:
    uri = set_query_params(DATABASES_URI, params)
    resp = api.make_request("GET", uri)
    return decode_many(resp, "databases", Database)


def get_database(api: DBaaSAPI, database_id: str) -> Database:
    resp = api.make_request("GET", f"{DATABASES_URI}/{database_id}")
    return decode_one(resp, "database", Database)


def create_database(api: DBaaSAPI, opts: DatabaseCreateOpts) -> Database:
    resp = api.make_request("POST", DATABASES_URI, {"database": opts})
    return decode_one(resp, "database", Database)


def update_database(
    api: DBaaSAPI, database_id: str, opts: DatabaseUpdateOpts
) -> Database:
    """Changes the owner of an existing database."""
    uri = f"{DATABASES_URI}/{database_id}"
    resp = api.make_request("PUT", uri, {"database": opts})
    return decode_one(resp, "database", Database)


def delete_database(api: DBaaSAPI, database_id: str) -> None:
    api.make_request("DELETE", f"{DATABASES_URI}/{database_id}")
