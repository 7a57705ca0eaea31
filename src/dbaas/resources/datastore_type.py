from ..clients import DBaaSAPI
from ..core import DATASTORE_TYPES_URI
from ..encoding import decode_many, decode_one
from ..schemas.datastore_type import DatastoreType


def list_datastore_types(api: DBaaSAPI) -> list[DatastoreType]:
    """Lists the engines and versions datastores can be created with."""
    resp = api.make_request("GET", DATASTORE_TYPES_URI)
    return decode_many(resp, "datastore-types", DatastoreType)


def get_datastore_type(api: DBaaSAPI, datastore_type_id: str) -> DatastoreType:
    resp = api.make_request("GET", f"{DATASTORE_TYPES_URI}/{datastore_type_id}")
    return decode_one(resp, "datastore-type", DatastoreType)
