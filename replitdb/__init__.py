"""**The replitdb API.**

replitdb provides a small client for the hosted Replit key value database in
a blocking and a non-blocking (asyncio) flavour. The mode is chosen by the
module that is imported.

    import replitdb.data.blocking as KV

    client = KV.connect()  # Reads REPLIT_DB_URL.
    client.kv_set("hello", "world")
    client.kv_get("hello")

    import replitdb.data.nonblocking as AKV

    client = AKV.connect()
    await client.kv_set("hello", "world")
    await client.kv_get("hello")
"""
from replitdb.errors import ConfigError, DecodeError, Error, NotFound, RemoteError, TransportError
from replitdb.settings import Config


__all__ = ["Config", "ConfigError", "DecodeError", "Error", "NotFound", "RemoteError", "TransportError"]
__version__ = "0.1.0"
