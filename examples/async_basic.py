import asyncio

import replitdb.data.nonblocking as KV


async def main():
    async with KV.connect() as client:
        await client.set("Hello", "World")
        print(await client.get("Hello"))
        print(await client.list())  # All keys.
        await client.delete("Hello")


asyncio.run(main())
