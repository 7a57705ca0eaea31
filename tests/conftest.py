import json

import httpx
import pytest

from dbaas.clients import DBaaSAPI, get_dbaas_client

TEST_TOKEN = "fakeID"
TEST_ENDPOINT = "http://127.0.0.1:8080/v1"
DATASTORE_ID = "20d7bcf4-f8d6-4bf6-b8f6-46cb440a87f4"

NOT_FOUND_BODY = {
    "error": {"code": 404, "title": "Not Found", "message": "not found."}
}


class FakeDBaaS:
    """
    In-memory stand-in for the DBaaS API, served through httpx.MockTransport.

    Routes are keyed by (method, path) with the /v1 prefix left out. Every
    request is recorded so tests can inspect headers and bodies.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, str]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, body=None, status: int = 200) -> None:
        if not isinstance(body, str):
            body = "" if body is None else json.dumps(body)
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1")
        status, body = self.routes.get(
            (request.method, path), (404, json.dumps(NOT_FOUND_BODY))
        )
        return httpx.Response(status, content=body.encode())

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def fake_api():
    return FakeDBaaS()


@pytest.fixture
def api(fake_api):
    http_client = httpx.Client(transport=httpx.MockTransport(fake_api.handler))
    client = DBaaSAPI(TEST_TOKEN, TEST_ENDPOINT, http_client=http_client)
    yield client
    http_client.close()


@pytest.fixture(autouse=True)
def clear_client_registry():
    get_dbaas_client.cache_clear()
    yield
    get_dbaas_client.cache_clear()


def datastore_json(datastore_id: str = DATASTORE_ID, **overrides) -> dict:
    data = {
        "id": datastore_id,
        "created_at": "1970-01-01T00:00:00",
        "updated_at": "1970-01-01T00:00:00",
        "creation_finished_at": "1970-01-01T00:00:01",
        "project_id": "123e4567e89b12d3a456426655440000",
        "name": "Name",
        "status": "ACTIVE",
        "enabled": True,
        "type_id": DATASTORE_ID,
        "subnet_id": DATASTORE_ID,
        "node_count": 1,
        "is_maintenance": False,
        "is_protected": False,
        "backup_retention_days": 7,
        "connection": {
            "MASTER": f"master.{datastore_id}.c.dbaas.selcloud.org",
            "master": f"master.{datastore_id}.c.dbaas.selcloud.org",
        },
        "flavor": {"vcpus": 2, "ram": 2048, "disk": 32, "disk_type": "local"},
        "instances": [
            {
                "id": "30d7bcf4-f8d6-4bf6-b8f6-46cb440a87f4",
                "ip": "127.0.0.1",
                "floating_ip": "None",
                "role": "MASTER",
                "role_name": "Some Role Name",
                "status": "ACTIVE",
                "hostname": "9c387698-42a9-4555-9a8c-46eee7dc8c55.ru-1.c.dbaas.selcloud.org",
                "availability_zone": "ru-1",
            }
        ],
        "pooler": {"size": 30, "mode": "session"},
        "firewall": [{"ip": "127.0.0.1"}],
        "databases_count": 1,
        "topics_count": 0,
        "disk_used": 2,
        "security_groups": [],
        "config": {},
    }
    data.update(overrides)
    return data
