"""
replitdb: read and write a Replit Database from the command line.
"""
import argparse
import json
import sys
from typing import Any, List, Optional

import structlog as logging

from replitdb.common.asyncio import sync_await
import replitdb.data.blocking as KV
import replitdb.data.nonblocking as AKV
from replitdb.errors import Error


_LOGGER = logging.getLogger("replitdb")

LOG_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40, "critical": 50}


def configure_logging(cli_args: argparse.Namespace):
    logging.configure(
        wrapper_class=logging.make_filtering_bound_logger(LOG_LEVELS[cli_args.log_level]),
        logger_factory=logging.PrintLoggerFactory(file=sys.stderr),
    )


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="replitdb", description=__doc__)
    parser.add_argument("--url", help="database url (defaults to $REPLIT_DB_URL)")
    parser.add_argument("--token", help="database token (defaults to the last segment of the url)")
    parser.add_argument("--timeout", type=float, help="seconds to wait on each request")
    parser.add_argument("--json", action="store_true", help="encode and decode values as JSON")
    parser.add_argument("--async", dest="use_async", action="store_true", help="use the asyncio client")
    parser.add_argument("--log-level", choices=sorted(LOG_LEVELS, key=LOG_LEVELS.get), default="warning")

    commands = parser.add_subparsers(dest="command", required=True)
    get = commands.add_parser("get", help="print the value of a key")
    get.add_argument("key")
    set_ = commands.add_parser("set", help="store a value under a key")
    set_.add_argument("key")
    set_.add_argument("value")
    delete = commands.add_parser("delete", help="delete a key")
    delete.add_argument("key")
    list_ = commands.add_parser("list", help="list keys, optionally by prefix")
    list_.add_argument("prefix", nargs="?", default="")
    return parser


def execute(client, cli_args: argparse.Namespace) -> Any:
    if cli_args.command == "get":
        result = client.get(cli_args.key)
    elif cli_args.command == "set":
        value = json.loads(cli_args.value) if cli_args.json else cli_args.value
        result = client.set(cli_args.key, value)
    elif cli_args.command == "delete":
        result = client.delete(cli_args.key)
    else:
        result = client.list(cli_args.prefix)

    if cli_args.use_async:
        # The asyncio client hands back a coroutine.
        result = sync_await(result)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    cli_args = get_parser().parse_args(argv)
    configure_logging(cli_args)

    mode = AKV if cli_args.use_async else KV
    try:
        with mode.connect(
            url=cli_args.url,
            token=cli_args.token,
            timeout=cli_args.timeout,
            codec="json" if cli_args.json else "text",
        ) as client:
            _LOGGER.debug("connected", client=repr(client), command=cli_args.command)
            result = execute(client, cli_args)
    except Error as e:
        _LOGGER.error("command failed", command=cli_args.command, error=str(e))
        return 1
    except ValueError as e:
        # Invalid keys and unparsable --json values.
        _LOGGER.error("invalid argument", command=cli_args.command, error=str(e))
        return 1

    if cli_args.command == "get":
        print(json.dumps(result) if cli_args.json else result)
    elif cli_args.command == "list":
        for key in result:
            print(key)
    return 0


if __name__ == "__main__":
    sys.exit(main())
