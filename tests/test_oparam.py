import pytest

from pasmpp.oparam import OptionalParameters
from pasmpp.params import MessageState, OparamTag


def test_encode_wire_layout():
    params = OptionalParameters()
    params.set_string(OparamTag.RECEIPTED_MESSAGE_ID, b"abc")
    assert params.encode() == b"\x00\x1e\x00\x03abc"


def test_empty_encodes_to_nothing():
    assert OptionalParameters().encode() == b""
    assert OptionalParameters.from_bytes(b"") == OptionalParameters()


def test_encode_is_sorted_by_tag():
    params = OptionalParameters()
    params.set_string(OparamTag.MESSAGE_PAYLOAD, b"x")
    params.set_string(OparamTag.RECEIPTED_MESSAGE_ID, b"y")
    encoded = params.encode()
    assert encoded.startswith(bytes([0x00, 0x1E]))
    assert list(params) == [OparamTag.RECEIPTED_MESSAGE_ID, OparamTag.MESSAGE_PAYLOAD]


def test_round_trip():
    params = OptionalParameters()
    params.set_string(OparamTag.SRC_CLIENT_ID, b"client-a")
    params.set_string(OparamTag.MESSAGE_PAYLOAD, b"\x00\x01\x02" * 100)
    params.set_byte_enum(OparamTag.MESSAGE_STATE, MessageState.DELIVERED)
    decoded = OptionalParameters.from_bytes(params.encode())
    assert decoded == params
    assert decoded.encode() == params.encode()


def test_unknown_tag_round_trips():
    params = OptionalParameters({0x1500: b"zz"})
    decoded = OptionalParameters.from_bytes(params.encode())
    assert decoded.get_string(0x1500) == b"zz"


def test_truncated_value_raises():
    params = OptionalParameters()
    params.set_string(OparamTag.CALLBACK_NUM, b"12345")
    with pytest.raises(ValueError):
        OptionalParameters.from_bytes(params.encode()[:-1])


def test_trailing_short_bytes_are_ignored():
    params = OptionalParameters()
    params.set_string(OparamTag.SOURCE_PORT, b"\x00\x50")
    decoded = OptionalParameters.from_bytes(params.encode() + b"\x00\x01\x02")
    assert decoded == params


def test_duplicate_tag_keeps_first_value():
    first = OptionalParameters({OparamTag.DEST_IMSI: b"first"}).encode()
    second = OptionalParameters({OparamTag.DEST_IMSI: b"second"}).encode()
    decoded = OptionalParameters.from_bytes(first + second)
    assert decoded.get_string(OparamTag.DEST_IMSI) == b"first"
    assert len(decoded) == 1


def test_missing_tag_raises_key_error():
    with pytest.raises(KeyError):
        OptionalParameters().get_string(OparamTag.VLR_NUMBER)


def test_value_too_long_raises():
    params = OptionalParameters()
    with pytest.raises(ValueError):
        params.set_string(OparamTag.MESSAGE_PAYLOAD, b"a" * 65536)
    assert OparamTag.MESSAGE_PAYLOAD not in params


def test_max_length_value_accepted():
    params = OptionalParameters()
    params.set_string(OparamTag.MESSAGE_PAYLOAD, b"a" * 65535)
    assert len(params.get_string(OparamTag.MESSAGE_PAYLOAD)) == 65535


def test_byte_enum_round_trip():
    params = OptionalParameters()
    params.set_byte_enum(OparamTag.MESSAGE_STATE, MessageState.REJECTED)
    assert params.get_byte_enum(OparamTag.MESSAGE_STATE, MessageState) is MessageState.REJECTED
    assert params.get_string(OparamTag.MESSAGE_STATE) == bytes([int(MessageState.REJECTED)])


def test_discard_and_contains():
    params = OptionalParameters()
    params.set_string(OparamTag.SGW_CLIENT_ID, b"gw")
    assert OparamTag.SGW_CLIENT_ID in params
    params.discard(OparamTag.SGW_CLIENT_ID)
    assert OparamTag.SGW_CLIENT_ID not in params
    params.discard(OparamTag.SGW_CLIENT_ID)
    assert len(params) == 0


def test_set_replaces_existing_value():
    params = OptionalParameters()
    params.set_string(OparamTag.DST_CLIENT_ID, b"one")
    params.set_string(OparamTag.DST_CLIENT_ID, b"two")
    assert params.get_string(OparamTag.DST_CLIENT_ID) == b"two"
    assert len(params) == 1