"""
Provide a blocking Replit Database client.

Each call occupies the calling thread for one HTTP round trip. The client
holds no state besides the `requests.Session` connection pool, so one client
may be shared across threads.
"""
from typing import Any, List, Optional, Union

import requests

from replitdb.codec import Codec, get_codec
import replitdb.common.kv as KV
from replitdb.data import transport
from replitdb.settings import Config


# kv interface


def connect(
    config: Optional[Config] = None,
    codec: Union[str, Codec] = "text",
    session: Optional[requests.Session] = None,
    **kwargs,
) -> KV.Client:
    """Connect to a Replit Database.

    Parameters
    ----------
    config : Config, optional
        A resolved configuration. When omitted, one is resolved from the
        remaining keyword arguments and the environment.
    codec : Union[str, Codec], optional
        How values are encoded on the wire. Defaults to "text".
    session : requests.Session, optional
        The HTTP session to issue requests with. A new one is created by default.
    url, token, timeout : optional
        Passed to `Config.resolve` when `config` is omitted.
    """
    # Resolve everything that can fail before any transport is opened.
    config = config if config is not None else Config.resolve(**kwargs)
    codec = get_codec(codec)

    raw_client = session if session is not None else requests.Session()
    client = KV.Client(raw_client, name="blocking", config=config, codec=codec)
    return KV.bind(client, globals())


def disconnect(client: KV.Client, *args, **kwargs):
    client.raw_client.close()


def kv_get(client: KV.Client, key: str) -> Any:
    return transport.get_value(client, key)


def kv_set(client: KV.Client, key: str, value: Any) -> None:
    """
    Store `value` under `key`, overwriting any existing value.
    """
    transport.set_value(client, key, value)


def kv_pop(client: KV.Client, key: str) -> None:
    transport.delete_key(client, key)


def kv_list(client: KV.Client, prefix: str = "") -> List[str]:
    return transport.list_keys(client, prefix)
