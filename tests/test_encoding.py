from urllib.parse import parse_qsl, urlsplit

import pytest

from dbaas.encoding import (
    coerce_config_value,
    convert_config_values,
    decode_many,
    decode_one,
    handle_params,
    set_query_params,
)
from dbaas.errors import DecodeError, ErrorCategory
from dbaas.schemas.acl import ACLQueryParams
from dbaas.schemas.common import Status
from dbaas.schemas.datastore import DatastoreQueryParams, DatastoreUpdateOpts, Pooler
from dbaas.schemas.datastore_type import DatastoreType


def test_convert_config_values_numbers_and_strings():
    result = convert_config_values({"work_mem": "256", "mode": "AUTO"})

    assert result == {"work_mem": 256, "mode": "AUTO"}
    assert isinstance(result["work_mem"], int)


def test_convert_config_values_bool():
    result = convert_config_values({"enabled": "true"})

    assert result["enabled"] is True


def test_convert_config_values_empty():
    assert convert_config_values(None) == {}
    assert convert_config_values({}) == {}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10", 10),
        ("-3", -3),
        ("0.5", 0.5),
        ("1e3", 1000.0),
        ("1", 1),
        ("0", 0),
        ("t", True),
        ("FALSE", False),
        ("yes", "yes"),
        ("2GB", "2GB"),
        (" 1.5", " 1.5"),
        ("1_000", "1_000"),
        ("inf", "inf"),
        ("-Infinity", "-Infinity"),
        ("nan", "nan"),
        ("", ""),
    ],
)
def test_coerce_config_value_strings(raw, expected):
    result = coerce_config_value(raw)

    assert result == expected
    assert type(result) is type(expected)


def test_coerce_config_value_leaves_typed_values():
    assert coerce_config_value(5) == 5
    assert coerce_config_value(False) is False
    assert coerce_config_value(None) is None


def test_set_query_params_only_non_zero_fields():
    params = DatastoreQueryParams(
        project_id="123e4567e89b12d3a456426655440000",
        status=Status.ACTIVE,
        name="",
        is_protected=False,
    )

    uri = set_query_params("/datastores", params)

    parts = urlsplit(uri)
    assert parts.path == "/datastores"
    assert dict(parse_qsl(parts.query)) == {
        "project_id": "123e4567e89b12d3a456426655440000",
        "status": "ACTIVE",
    }


def test_set_query_params_bool_true():
    uri = set_query_params("/datastores", DatastoreQueryParams(is_maintenance=True))

    assert uri == "/datastores?is_maintenance=true"


def test_set_query_params_sorted_and_escaped():
    params = ACLQueryParams(user_id="u1", pattern="topic a&b", datastore_id="d1")

    uri = set_query_params("/acls", params)

    assert uri == "/acls?datastore_id=d1&pattern=topic+a%26b&user_id=u1"


def test_set_query_params_nothing_set():
    assert set_query_params("/acls", ACLQueryParams()) == "/acls"
    assert set_query_params("/acls", None) == "/acls"


def test_handle_params():
    assert handle_params(None) is None
    assert handle_params(b"raw") == b"raw"
    assert handle_params(Pooler(mode="session")) == b'{"mode":"session"}'
    assert handle_params({"datastore": DatastoreUpdateOpts(name="x")}) == (
        b'{"datastore": {"name": "x"}}'
    )


def test_decode_one():
    body = b'{"datastore-type": {"id": "1", "engine": "postgresql", "version": "16"}}'

    result = decode_one(body, "datastore-type", DatastoreType)

    assert result == DatastoreType(id="1", engine="postgresql", version="16")


def test_decode_one_bare_body():
    body = b'{"id": "1", "engine": "redis"}'

    with pytest.raises(DecodeError):
        decode_one(body, "datastore-type", DatastoreType)

    result = decode_one(body, "datastore-type", DatastoreType, allow_bare=True)
    assert result.engine == "redis"


def test_decode_invalid_json():
    with pytest.raises(DecodeError) as exc_info:
        decode_one(b"<html>", "datastore-type", DatastoreType)

    assert exc_info.value.category == ErrorCategory.DECODE


def test_decode_missing_envelope():
    with pytest.raises(DecodeError, match="no 'flavors' envelope"):
        decode_many(b'{"datastores": []}', "flavors", DatastoreType)


def test_decode_many_null_list():
    assert decode_many(b'{"datastore-types": null}', "datastore-types", DatastoreType) == []


def test_decode_many_invalid_item():
    with pytest.raises(DecodeError):
        decode_many(b'{"datastore-types": [{"engine": "x"}]}', "datastore-types", DatastoreType)
