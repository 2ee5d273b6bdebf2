"""
Value codecs.

The database stores text. A codec turns a caller's value into that text on
write and back into a value on read.
"""
import json
from typing import Any, Callable, Dict, NamedTuple, Union

from replitdb.errors import ConfigError, DecodeError


class Codec(NamedTuple):
    name: str
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]


def _decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise DecodeError(f"value is not valid JSON: {e}") from e


TEXT = Codec("text", str, str)
JSON = Codec("json", json.dumps, _decode_json)

CODECS: Dict[str, Codec] = {codec.name: codec for codec in (TEXT, JSON)}


def get_codec(codec: Union[str, Codec]) -> Codec:
    """Look up a codec by name, passing through `Codec` instances."""
    if isinstance(codec, Codec):
        return codec
    try:
        return CODECS[codec]
    except KeyError:
        raise ConfigError(f"unknown codec {codec!r}, expected one of: {', '.join(sorted(CODECS))}") from None
