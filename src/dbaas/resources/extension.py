from ..clients import DBaaSAPI
from ..core import AVAILABLE_EXTENSIONS_URI, EXTENSIONS_URI
from ..encoding import decode_many, decode_one, set_query_params
from ..schemas.extension import (
    AvailableExtension,
    Extension,
    ExtensionCreateOpts,
    ExtensionQueryParams,
)


def list_extensions(
    api: DBaaSAPI, params: ExtensionQueryParams | None = None
) -> list[Extension]:
    uri = set_query_params(EXTENSIONS_URI, params)
    resp = api.make_request("GET", uri)
    return decode_many(resp, "extensions", Extension)


def get_extension(api: DBaaSAPI, extension_id: str) -> Extension:
    resp = api.make_request("GET", f"{EXTENSIONS_URI}/{extension_id}")
    return decode_one(resp, "extension", Extension)


def create_extension(api: DBaaSAPI, opts: ExtensionCreateOpts) -> Extension:
    """Installs an available extension into a database."""
    resp = api.make_request("POST", EXTENSIONS_URI, {"extension": opts})
    return decode_one(resp, "extension", Extension)


def delete_extension(api: DBaaSAPI, extension_id: str) -> None:
    api.make_request("DELETE", f"{EXTENSIONS_URI}/{extension_id}")


# Available extensions (catalog, read-only)


def list_available_extensions(api: DBaaSAPI) -> list[AvailableExtension]:
    resp = api.make_request("GET", AVAILABLE_EXTENSIONS_URI)
    return decode_many(resp, "available-extensions", AvailableExtension)


def get_available_extension(
    api: DBaaSAPI, available_extension_id: str
) -> AvailableExtension:
    uri = f"{AVAILABLE_EXTENSIONS_URI}/{available_extension_id}"
    resp = api.make_request("GET", uri)
    return decode_one(resp, "available-extension", AvailableExtension)
