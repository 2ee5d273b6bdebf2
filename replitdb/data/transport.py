"""
The request-execution routines shared by the blocking and non-blocking
clients.

Each routine performs exactly one HTTP exchange against the database
endpoint and either returns the decoded result or raises a
`replitdb.errors.Error`.

## Wire Format

- get:    GET    {endpoint}/{key}            200 -> encoded value, 404 -> absent
- set:    POST   {endpoint}  body `key=value` (form encoded)
- delete: DELETE {endpoint}/{key}            404 -> absent
- list:   GET    {endpoint}?prefix={prefix}  newline separated keys

Keys and values are percent-encoded with no safe characters, so keys may
contain '/', '=' or '&'.
"""
from typing import Any, List, Optional
from urllib.parse import quote

import requests
import structlog as logging

from replitdb.common import AbstractClient
from replitdb.errors import DecodeError, NotFound, RemoteError, TransportError


_LOGGER = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _quote(text: str) -> str:
    return quote(text, safe="")


def _key(key: Any) -> str:
    key = str(key)
    if not key:
        raise ValueError("key must be a non-empty string")
    return key


def _send(client: AbstractClient, method: str, url: str, key: Optional[str] = None, **kwargs) -> requests.Response:
    config = client.meta["config"]
    try:
        response = client.raw_client.request(method, url, timeout=config.timeout, **kwargs)
    except requests.RequestException as e:
        raise TransportError(f"{method} request failed: {e}") from e
    _LOGGER.debug("database request", method=method, key=key, status=response.status_code)
    return response


def _text(response: requests.Response) -> str:
    # The service always answers in UTF-8; do not let requests guess.
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"response body is not valid UTF-8: {e}") from e


def _raise_for_status(response: requests.Response, action: str):
    if not response.ok:
        raise RemoteError(f"could not {action}", response.status_code)


def get_value(client: AbstractClient, key: Any) -> Any:
    key = _key(key)
    endpoint = client.meta["config"].endpoint
    response = _send(client, "GET", f"{endpoint}/{_quote(key)}", key=key)
    if response.status_code == 404:
        raise NotFound(key)
    _raise_for_status(response, f"get {key!r}")
    return client.meta["codec"].decode(_text(response))


def set_value(client: AbstractClient, key: Any, value: Any) -> None:
    key = _key(key)
    endpoint = client.meta["config"].endpoint
    payload = f"{_quote(key)}={_quote(client.meta['codec'].encode(value))}"
    response = _send(
        client,
        "POST",
        endpoint,
        key=key,
        data=payload.encode("utf-8"),
        headers={"Content-Type": FORM_CONTENT_TYPE},
    )
    _raise_for_status(response, f"set {key!r}")


def delete_key(client: AbstractClient, key: Any) -> None:
    key = _key(key)
    endpoint = client.meta["config"].endpoint
    response = _send(client, "DELETE", f"{endpoint}/{_quote(key)}", key=key)
    if response.status_code == 404:
        raise NotFound(key)
    _raise_for_status(response, f"delete {key!r}")


def list_keys(client: AbstractClient, prefix: Any = "") -> List[str]:
    prefix = "" if prefix is None else str(prefix)
    endpoint = client.meta["config"].endpoint
    response = _send(client, "GET", endpoint, params={"prefix": prefix})
    _raise_for_status(response, f"list keys with prefix {prefix!r}")
    return [line for line in _text(response).split("\n") if line]
