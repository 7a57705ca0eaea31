from ..clients import DBaaSAPI
from ..core import GRANTS_URI
from ..encoding import decode_many, decode_one
from ..schemas.grant import Grant, GrantCreateOpts


def list_grants(api: DBaaSAPI) -> list[Grant]:
    resp = api.make_request("GET", GRANTS_URI)
    return decode_many(resp, "grants", Grant)


def get_grant(api: DBaaSAPI, grant_id: str) -> Grant:
    resp = api.make_request("GET", f"{GRANTS_URI}/{grant_id}")
    return decode_one(resp, "grant", Grant)


def create_grant(api: DBaaSAPI, opts: GrantCreateOpts) -> Grant:
    """Gives a user access to a database."""
    resp = api.make_request("POST", GRANTS_URI, {"grant": opts})
    return decode_one(resp, "grant", Grant)


def delete_grant(api: DBaaSAPI, grant_id: str) -> None:
    api.make_request("DELETE", f"{GRANTS_URI}/{grant_id}")
