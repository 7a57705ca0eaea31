import uuid

from ..clients import DBaaSAPI
from ..core import (
    BACKUPS_POSTFIX,
    CONFIG_POSTFIX,
    DATASTORES_URI,
    FIREWALL_POSTFIX,
    LOG_PLATFORM_POSTFIX,
    PASSWORD_POSTFIX,
    POOLER_POSTFIX,
    RESIZE_POSTFIX,
    SECURITY_GROUPS_POSTFIX,
)
from ..encoding import convert_config_values, decode_many, decode_one, set_query_params
from ..errors import InvalidIDError
from ..schemas.datastore import (
    Datastore,
    DatastoreBackupsOpts,
    DatastoreConfigOpts,
    DatastoreCreateOpts,
    DatastoreFirewallOpts,
    DatastorePasswordOpts,
    DatastorePoolerOpts,
    DatastoreQueryParams,
    DatastoreResizeOpts,
    DatastoreSecurityGroupOpts,
    DatastoreUpdateOpts,
    LogPlatformOpts,
)


def _datastore_uri(datastore_id: str, postfix: str | None = None) -> str:
    try:
        uuid.UUID(datastore_id)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidIDError(f"error during datastore_id validate, {e}") from e

    uri = f"{DATASTORES_URI}/{datastore_id}"
    if postfix:
        uri = f"{uri}/{postfix}"
    return uri


def list_datastores(
    api: DBaaSAPI, params: DatastoreQueryParams | None = None
) -> list[Datastore]:
    uri = set_query_params(DATASTORES_URI, params)
    resp = api.make_request("GET", uri)
    return decode_many(resp, "datastores", Datastore)


def get_datastore(api: DBaaSAPI, datastore_id: str) -> Datastore:
    resp = api.make_request("GET", _datastore_uri(datastore_id))
    return decode_one(resp, "datastore", Datastore)


def create_datastore(api: DBaaSAPI, opts: DatastoreCreateOpts) -> Datastore:
    """
    Creates a new datastore.

    String config values are coerced to numbers or booleans before sending.
    """
    config = convert_config_values(opts.config) or None
    payload = opts.model_copy(update={"config": config})

    resp = api.make_request("POST", DATASTORES_URI, {"datastore": payload})
    return decode_one(resp, "datastore", Datastore)


def update_datastore(
    api: DBaaSAPI, datastore_id: str, opts: DatastoreUpdateOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id)
    resp = api.make_request("PUT", uri, {"datastore": opts})
    return decode_one(resp, "datastore", Datastore)


def delete_datastore(api: DBaaSAPI, datastore_id: str) -> None:
    api.make_request("DELETE", _datastore_uri(datastore_id))


def resize_datastore(
    api: DBaaSAPI, datastore_id: str, opts: DatastoreResizeOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, RESIZE_POSTFIX)
    resp = api.make_request("POST", uri, {"resize": opts})
    return decode_one(resp, "datastore", Datastore)


def update_pooler(
    api: DBaaSAPI, datastore_id: str, opts: DatastorePoolerOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, POOLER_POSTFIX)
    resp = api.make_request("PUT", uri, {"pooler": opts})
    return decode_one(resp, "datastore", Datastore)


def update_firewall(
    api: DBaaSAPI, datastore_id: str, opts: DatastoreFirewallOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, FIREWALL_POSTFIX)
    resp = api.make_request("PUT", uri, {"firewall": opts})
    return decode_one(resp, "datastore", Datastore)


def update_config(
    api: DBaaSAPI, datastore_id: str, opts: DatastoreConfigOpts
) -> Datastore:
    """Updates configuration parameters, coercing string values first."""
    uri = _datastore_uri(datastore_id, CONFIG_POSTFIX)
    payload = DatastoreConfigOpts(config=convert_config_values(opts.config))
    resp = api.make_request("PUT", uri, payload)
    return decode_one(resp, "datastore", Datastore)


def update_password(
    api: DBaaSAPI, datastore_id: str, opts: DatastorePasswordOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, PASSWORD_POSTFIX)
    resp = api.make_request("PUT", uri, {"password": opts})
    return decode_one(resp, "datastore", Datastore)


def update_backups(
    api: DBaaSAPI, datastore_id: str, opts: DatastoreBackupsOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, BACKUPS_POSTFIX)
    resp = api.make_request("PUT", uri, {"backups": opts})
    return decode_one(resp, "datastore", Datastore)


def update_security_groups(
    api: DBaaSAPI, datastore_id: str, opts: DatastoreSecurityGroupOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, SECURITY_GROUPS_POSTFIX)
    resp = api.make_request("PUT", uri, opts)
    return decode_one(resp, "datastore", Datastore)


def enable_log_platform(
    api: DBaaSAPI, datastore_id: str, opts: LogPlatformOpts
) -> Datastore:
    uri = _datastore_uri(datastore_id, LOG_PLATFORM_POSTFIX)
    resp = api.make_request("PUT", uri, opts)
    return decode_one(resp, "datastore", Datastore)


def disable_log_platform(api: DBaaSAPI, datastore_id: str) -> None:
    api.make_request("DELETE", _datastore_uri(datastore_id, LOG_PLATFORM_POSTFIX))
