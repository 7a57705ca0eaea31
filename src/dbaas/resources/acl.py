from ..clients import DBaaSAPI
from ..core import ACLS_URI
from ..encoding import decode_many, decode_one, set_query_params
from ..schemas.acl import ACL, ACLCreateOpts, ACLQueryParams, ACLUpdateOpts


def list_acls(api: DBaaSAPI, params: ACLQueryParams | None = None) -> list[ACL]:
    uri = set_query_params(ACLS_URI, params)
    resp = api.make_request("GET", uri)
    return decode_many(resp, "acls", ACL)


def get_acl(api: DBaaSAPI, acl_id: str) -> ACL:
    resp = api.make_request("GET", f"{ACLS_URI}/{acl_id}")
    return decode_one(resp, "acl", ACL)


def create_acl(api: DBaaSAPI, opts: ACLCreateOpts) -> ACL:
    resp = api.make_request("POST", ACLS_URI, {"acl": opts})
    return decode_one(resp, "acl", ACL)


def update_acl(api: DBaaSAPI, acl_id: str, opts: ACLUpdateOpts) -> ACL:
    resp = api.make_request("PUT", f"{ACLS_URI}/{acl_id}", {"acl": opts})
    return decode_one(resp, "acl", ACL)


def delete_acl(api: DBaaSAPI, acl_id: str) -> None:
    api.make_request("DELETE", f"{ACLS_URI}/{acl_id}")
