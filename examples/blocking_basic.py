import replitdb.data.blocking as KV

client = KV.connect()  # Reads REPLIT_DB_URL, which every Repl provides.

# The standard KV interface supports "get", "set", "pop" and "list".

client.kv_set("Hello", "World")

KV.kv_get(client, "Hello")

client.kv_list("H")  # Keys with an "H" prefix.

client.kv_pop("Hello")

# All data clients from replitdb expose the underlying HTTP session for
# manual interaction.

session = client.raw_client
print(session.headers)

client.disconnect()
