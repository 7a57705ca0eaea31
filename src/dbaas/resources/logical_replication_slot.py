from ..clients import DBaaSAPI
from ..core import LOGICAL_REPLICATION_SLOTS_URI
from ..encoding import decode_many, decode_one, set_query_params
from ..schemas.logical_replication_slot import (
    LogicalReplicationSlot,
    LogicalReplicationSlotCreateOpts,
    LogicalReplicationSlotQueryParams,
)


def list_logical_replication_slots(
    api: DBaaSAPI, params: LogicalReplicationSlotQueryParams | None = None
) -> list[LogicalReplicationSlot]:
    uri = set_query_params(LOGICAL_REPLICATION_SLOTS_URI, params)
    resp = api.make_request("GET", uri)
    return decode_many(resp, "logical-replication-slots", LogicalReplicationSlot)


def get_logical_replication_slot(api: DBaaSAPI, slot_id: str) -> LogicalReplicationSlot:
    resp = api.make_request("GET", f"{LOGICAL_REPLICATION_SLOTS_URI}/{slot_id}")
    return decode_one(resp, "logical-replication-slot", LogicalReplicationSlot)


def create_logical_replication_slot(
    api: DBaaSAPI, opts: LogicalReplicationSlotCreateOpts
) -> LogicalReplicationSlot:
    resp = api.make_request(
        "POST", LOGICAL_REPLICATION_SLOTS_URI, {"logical-replication-slot": opts}
    )
    return decode_one(resp, "logical-replication-slot", LogicalReplicationSlot)


def delete_logical_replication_slot(api: DBaaSAPI, slot_id: str) -> None:
    api.make_request("DELETE", f"{LOGICAL_REPLICATION_SLOTS_URI}/{slot_id}")
