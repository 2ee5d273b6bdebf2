import pytest

from replitdb.codec import JSON, TEXT, Codec, get_codec
from replitdb.errors import ConfigError, DecodeError


def test_lookup_by_name():
    assert get_codec("text") is TEXT
    assert get_codec("json") is JSON


def test_codec_instances_pass_through():
    upper = Codec("upper", str.upper, str.lower)
    assert get_codec(upper) is upper


def test_unknown_codec():
    with pytest.raises(ConfigError):
        get_codec("pickle")


def test_text_encodes_with_str():
    assert TEXT.encode(42) == "42"
    assert TEXT.decode("42") == "42"


def test_json_decode_error():
    with pytest.raises(DecodeError):
        JSON.decode("not json")
