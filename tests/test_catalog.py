import pytest

from dbaas.errors import DecodeError, NotFoundError
from dbaas.resources.configuration_parameter import (
    get_configuration_parameter,
    list_configuration_parameters,
)
from dbaas.resources.datastore_type import get_datastore_type, list_datastore_types
from dbaas.resources.flavor import get_flavor, list_flavors
from dbaas.schemas.datastore_type import DatastoreType

FLAVOR_ID = "20d7bcf4-f8d6-4bf6-b8f6-46cb440a87f4"
TYPE_ID = "20d7bcf4-f8d6-4bf6-b8f6-46cb440a87f5"
PARAMETER_ID = "20d7bcf4-f8d6-4bf6-b8f6-46cb440a87f6"


def flavor_json(**overrides) -> dict:
    data = {
        "id": FLAVOR_ID,
        "name": "flavor-2",
        "description": "",
        "vcpus": 2,
        "ram": 4096,
        "disk": 10,
        "datastore_type_ids": [TYPE_ID],
        "fl_size": "standard",
    }
    data.update(overrides)
    return data


def test_list_flavors(api, fake_api):
    fake_api.add(
        "GET",
        "/flavors",
        {"flavors": [flavor_json(), flavor_json(id="other", name="flavor-3", vcpus=4)]},
    )

    flavors = list_flavors(api)

    assert [f.name for f in flavors] == ["flavor-2", "flavor-3"]
    assert flavors[1].vcpus == 4
    assert flavors[0].host is None


def test_get_flavor_with_host(api, fake_api):
    host = {"line": "Intel", "processor": "Xeon Gold 6240", "available_count": 5}
    fake_api.add("GET", f"/flavors/{FLAVOR_ID}", {"flavor": flavor_json(host=host)})

    flavor = get_flavor(api, FLAVOR_ID)

    assert flavor.fl_size == "standard"
    assert flavor.host.available_count == 5


def test_get_flavor_not_found(api, fake_api):
    with pytest.raises(NotFoundError):
        get_flavor(api, "missing")


def test_datastore_types(api, fake_api):
    item = {"id": TYPE_ID, "engine": "postgresql", "version": "16"}
    fake_api.add("GET", "/datastore-types", {"datastore-types": [item]})
    fake_api.add("GET", f"/datastore-types/{TYPE_ID}", {"datastore-type": item})

    assert list_datastore_types(api) == [DatastoreType(**item)]
    assert get_datastore_type(api, TYPE_ID).engine == "postgresql"


def test_datastore_type_wrong_envelope(api, fake_api):
    fake_api.add("GET", f"/datastore-types/{TYPE_ID}", {"datastore": {"id": TYPE_ID}})

    with pytest.raises(DecodeError):
        get_datastore_type(api, TYPE_ID)


def test_list_configuration_parameters(api, fake_api):
    fake_api.add(
        "GET",
        "/configuration-parameters",
        {
            "configuration-parameters": [
                {
                    "id": PARAMETER_ID,
                    "datastore_type_id": TYPE_ID,
                    "name": "temp_file_limit",
                    "type": "int",
                    "choices": None,
                    "min": -1,
                    "max": 2147483647,
                    "default_value": -1,
                    "unit": "kB",
                    "is_restart_required": False,
                    "is_changeable": True,
                },
                {
                    "id": PARAMETER_ID,
                    "datastore_type_id": TYPE_ID,
                    "name": "concurrent_insert",
                    "type": "str",
                    "choices": ["NEVER", "AUTO", "ALWAYS", "0", "1", "2"],
                    "min": None,
                    "max": None,
                    "default_value": "AUTO",
                    "unit": "",
                    "is_restart_required": False,
                    "is_changeable": True,
                },
            ]
        },
    )

    limit, insert = list_configuration_parameters(api)

    assert limit.min == -1
    assert limit.max == 2147483647
    assert limit.choices is None
    assert insert.choices == ["NEVER", "AUTO", "ALWAYS", "0", "1", "2"]
    assert insert.default_value == "AUTO"


def test_get_configuration_parameter(api, fake_api):
    fake_api.add(
        "GET",
        f"/configuration-parameters/{PARAMETER_ID}",
        {
            "configuration-parameter": {
                "id": PARAMETER_ID,
                "datastore_type_id": TYPE_ID,
                "name": "thread_pool_size",
                "type": "int",
                "choices": None,
                "min": 1,
                "max": 64,
                "default_value": None,
                "unit": "",
                "is_restart_required": True,
                "is_changeable": True,
            }
        },
    )

    parameter = get_configuration_parameter(api, PARAMETER_ID)

    assert parameter.name == "thread_pool_size"
    assert parameter.default_value is None
    assert parameter.is_restart_required is True
