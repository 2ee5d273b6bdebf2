class AbstractClient:
    """
    The AbstractClient is a general wrapper structure for database clients
    built on a pre-existing transport library.

    The raw client (the HTTP session) is preserved for the user to manipulate
    internals as necessary while otherwise providing convenience functions on
    top. Each mode module binds its kv functions onto the instance in
    `connect`.
    """

    def __init__(self, raw_client, **kwargs):
        self.raw_client = raw_client
        self.meta = kwargs

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.disconnect()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.disconnect()

    def __repr__(self):
        config = self.meta.get("config")
        url = config.url if config is not None else None
        return f"<{type(self).__name__} name={self.meta.get('name')!r} url={url!r}>"
