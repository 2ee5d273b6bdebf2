"""
Provide an asyncio Replit Database client.

Every kv call is a coroutine. The HTTP round trip runs on the running loop's
default executor, so awaiting a call suspends only the awaiting task.

There is no cancellation contract: cancelling or abandoning an awaitable
stops waiting for the result but does not guarantee that the remote
operation did not happen.
"""
from typing import Any, List, Optional, Union

import requests

from replitdb.codec import Codec, get_codec
from replitdb.common.asyncio import run_blocking
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

    Connecting does no network IO, so it is a plain function usable both
    inside and outside of a running loop. See `replitdb.data.blocking.connect`
    for the parameters.
    """
    config = config if config is not None else Config.resolve(**kwargs)
    codec = get_codec(codec)

    raw_client = session if session is not None else requests.Session()
    client = KV.Client(raw_client, name="nonblocking", config=config, codec=codec)
    return KV.bind(client, globals())


def disconnect(client: KV.Client, *args, **kwargs):
    client.raw_client.close()


async def kv_get(client: KV.Client, key: str) -> Any:
    return await run_blocking(transport.get_value, client, key)


async def kv_set(client: KV.Client, key: str, value: Any) -> None:
    await run_blocking(transport.set_value, client, key, value)


async def kv_pop(client: KV.Client, key: str) -> None:
    await run_blocking(transport.delete_key, client, key)


async def kv_list(client: KV.Client, prefix: str = "") -> List[str]:
    return await run_blocking(transport.list_keys, client, prefix)
