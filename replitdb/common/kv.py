"""
replitdb exposes the hosted key value database through one kv interface in
two execution modes.

# Modes

- replitdb.data.blocking: every call returns once the HTTP round trip is done.
- replitdb.data.nonblocking: every call is a coroutine for an asyncio loop.

The caller selects a mode by the module it imports; both return the same
results and raise the same errors for the same remote state.
"""
from typing import Any, Dict, List, Optional

from replitdb.common import AbstractClient


Client = AbstractClient
Symbols = ["disconnect", "kv_get", "kv_set", "kv_pop", "kv_list"]
Aliases = {"get": "kv_get", "set": "kv_set", "delete": "kv_pop", "list": "kv_list"}


def bind(client: Client, namespace: Dict[str, Any]) -> Client:
    """Make convenience bindings for the client from a mode module's namespace."""
    for sym in Symbols:
        setattr(client, sym, namespace[sym].__get__(client))
    for alias, sym in Aliases.items():
        setattr(client, alias, getattr(client, sym))
    return client


# Any kv wrapper must provide the following methods.


def connect(*args, **kwargs) -> Client:  # pragma: nocover
    raise NotImplementedError


def disconnect(client: Client, *args, **kwargs) -> Optional[Any]:  # pragma: nocover
    raise NotImplementedError


def kv_get(client: Client, key: str) -> Any:  # pragma: nocover
    raise NotImplementedError


def kv_set(client: Client, key: str, value: Any) -> None:  # pragma: nocover
    raise NotImplementedError


def kv_pop(client: Client, key: str) -> None:  # pragma: nocover
    raise NotImplementedError


def kv_list(client: Client, prefix: str = "") -> List[str]:  # pragma: nocover
    raise NotImplementedError
