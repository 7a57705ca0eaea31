from ..clients import DBaaSAPI
from ..core import FLAVORS_URI
from ..encoding import decode_many, decode_one
from ..schemas.flavor import FlavorResponse


def list_flavors(api: DBaaSAPI) -> list[FlavorResponse]:
    resp = api.make_request("GET", FLAVORS_URI)
    return decode_many(resp, "flavors", FlavorResponse)


def get_flavor(api: DBaaSAPI, flavor_id: str) -> FlavorResponse:
    resp = api.make_request("GET", f"{FLAVORS_URI}/{flavor_id}")
    return decode_one(resp, "flavor", FlavorResponse)
