from __future__ import annotations

from functools import lru_cache
from typing import Any

import httpx
from pydantic import ValidationError

from .config import Settings
from .core import AUTH_HEADER, USER_AGENT
from .encoding import handle_params
from .errors import (
    APIError,
    ConfigurationError,
    ServiceError,
    TransportError,
    api_error,
)
from .logger import logger
from .schemas.common import APIErrorBody


class DBaaSAPI:
    """
    Holds what is needed to talk to the DBaaS v1 API: an httpx client,
    the auth token, the service endpoint and the user agent.

    The instance is never mutated after construction, so it can be shared
    between threads. When no http_client is given one is created and
    closed together with this object.
    """

    def __init__(
        self,
        token: str,
        endpoint: str,
        http_client: httpx.Client | None = None,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.token = token
        self.endpoint = endpoint.rstrip("/")
        self.user_agent = user_agent
        self._owns_client = http_client is None
        self.http_client = http_client if http_client is not None else httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> DBaaSAPI:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, method: str, uri: str, body: bytes | None = None) -> httpx.Response:
        """
        Sends one request to `endpoint + uri` with the auth and user agent
        headers attached, returning the raw response.
        """
        headers = {
            "User-Agent": self.user_agent,
            AUTH_HEADER: self.token,
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"DBaaS request: {method} {uri}")
        response = self.http_client.request(
            method, self.endpoint + uri, content=body, headers=headers
        )
        logger.debug(f"DBaaS response: {method} {uri} -> {response.status_code}")

        return response

    def make_request(self, method: str, uri: str, params: Any = None) -> bytes:
        """
        Sends `params` as the JSON body and returns the response body.

        Raises TransportError when the call cannot be made, ServiceError on
        5xx and an APIError subclass on 4xx. Nothing is retried.
        """
        body = handle_params(params)

        try:
            response = self.request(method, uri, body)
        except httpx.HTTPError as e:
            logger.error(f"Error performing request: {method} {uri} : {e}")
            raise TransportError(
                f"HTTP request failed, {e}", method=method, path=uri
            ) from e

        if response.status_code >= 500:
            logger.error(
                f"Request: {method} {uri} got an error response {response.status_code}"
            )
            raise ServiceError(response.status_code, response.content, uri)

        if response.status_code >= 400:
            raise _client_error(response)

        return response.content


def _client_error(response: httpx.Response) -> APIError:
    try:
        detail = APIErrorBody.model_validate_json(response.content).error
    except ValidationError:
        # Not the documented error shape, keep what the server said
        return api_error(
            code=response.status_code,
            title=response.reason_phrase,
            message=response.text,
        )

    return api_error(code=detail.code, title=detail.title, message=detail.message)


def new_dbaas_client(
    token: str,
    endpoint: str,
    http_client: httpx.Client | None = None,
) -> DBaaSAPI:
    """Initializes a client for the V1 API, optionally on a custom httpx client."""
    return DBaaSAPI(token=token, endpoint=endpoint, http_client=http_client)


# Shared Client Registry (Lazy-loaded and cached)


@lru_cache(maxsize=1)
def get_dbaas_client() -> DBaaSAPI:
    settings = Settings.from_env()
    if not settings.token or not settings.endpoint:
        raise ConfigurationError(
            "DBAAS_TOKEN and DBAAS_ENDPOINT must be set to build a DBaaS client"
        )

    return DBaaSAPI(
        token=settings.token,
        endpoint=settings.endpoint,
        user_agent=settings.user_agent,
    )
