from dataclasses import dataclass, field

import pytest

from pasmpp.codec import (
    Cursor,
    Field,
    FieldKind,
    SmppLengthError,
    decode_fields,
    encode_fields,
    write_c_octet_string,
    write_u8_octet_string,
)
from pasmpp.oparam import OptionalParameters
from pasmpp.params import EsmClass, GsmNetworkFeatures, OparamTag, Ton


def test_take_u8_reads_and_advances():
    cursor = Cursor(b"\x07\x09")
    assert cursor.take_u8("a") == 7
    assert len(cursor) == 1
    assert cursor.take_u8("b") == 9
    assert len(cursor) == 0


def test_take_u8_empty_raises_with_field_name():
    with pytest.raises(SmppLengthError, match="field_name:protocol_id"):
        Cursor(b"").take_u8("protocol_id")


def test_take_c_octet_string():
    cursor = Cursor(b"abc\0rest")
    assert cursor.take_c_octet_string(10, "x") == "abc"
    assert cursor.take_rest() == b"rest"
    assert len(cursor) == 0


def test_take_c_octet_string_without_null():
    with pytest.raises(SmppLengthError, match="can't find null"):
        Cursor(b"abc").take_c_octet_string(10, "x")


def test_take_c_octet_string_limit_counts_terminator():
    with pytest.raises(SmppLengthError, match="exceed its limit"):
        Cursor(b"abc\0").take_c_octet_string(3, "x")
    assert Cursor(b"ab\0").take_c_octet_string(3, "x") == "ab"


def test_take_u8_octet_string():
    cursor = Cursor(b"\x03abcX")
    assert cursor.take_u8_octet_string(254, "sm") == b"abc"
    assert cursor.take_rest() == b"X"


def test_take_u8_octet_string_needs_length_byte():
    with pytest.raises(SmppLengthError, match="at least 1"):
        Cursor(b"").take_u8_octet_string(254, "sm")


def test_take_u8_octet_string_truncated():
    with pytest.raises(SmppLengthError, match="smaller than its length"):
        Cursor(b"\x05ab").take_u8_octet_string(254, "sm")


def test_take_u8_octet_string_over_limit():
    with pytest.raises(SmppLengthError, match="exceed its limit"):
        Cursor(b"\x03abc").take_u8_octet_string(2, "sm")


def test_write_c_octet_string():
    out = bytearray()
    write_c_octet_string(out, "abc", 10, "x")
    assert bytes(out) == b"abc\0"


def test_write_c_octet_string_limit():
    with pytest.raises(SmppLengthError, match="field_name:x"):
        write_c_octet_string(bytearray(), "abc", 3, "x")


def test_write_u8_octet_string():
    out = bytearray()
    write_u8_octet_string(out, b"abc", 254, "sm")
    assert bytes(out) == b"\x03abc"


def test_write_u8_octet_string_limit():
    with pytest.raises(SmppLengthError):
        write_u8_octet_string(bytearray(), b"abc", 2, "sm")


@pytest.mark.parametrize(
    "fld, value",
    [
        (Field("ton", FieldKind.ENUM_U8, Ton), Ton.INTERNATIONAL),
        (Field("esm", FieldKind.FLAG, EsmClass), EsmClass(gsm_network_features=GsmNetworkFeatures.UDHI)),
        (Field("pid", FieldKind.U8), 200),
        (Field("addr", FieldKind.C_OCTET_STR, max_length=21), "98912000000"),
        (Field("sm", FieldKind.U8_OCTET_STR, max_length=254), b"\x00\xffhello"),
    ],
)
def test_field_round_trip(fld, value):
    out = bytearray()
    fld.encode(out, value)
    cursor = Cursor(out)
    assert fld.decode(cursor) == value
    assert len(cursor) == 0


def test_smart_field_round_trip():
    fld = Field("oparam", FieldKind.SMART, OptionalParameters)
    params = OptionalParameters({OparamTag.RECEIPTED_MESSAGE_ID: b"42"})
    out = bytearray()
    fld.encode(out, params)
    assert fld.decode(Cursor(out)) == params


@dataclass
class _Sample:
    name: str = ""
    ton: Ton = Ton.UNKNOWN
    body: bytes = b""
    oparam: OptionalParameters = field(default_factory=OptionalParameters)


_FIELDS = (
    Field("name", FieldKind.C_OCTET_STR, max_length=16),
    Field("ton", FieldKind.ENUM_U8, Ton),
    Field("body", FieldKind.U8_OCTET_STR, max_length=254),
    Field("oparam", FieldKind.SMART, OptionalParameters),
)


def test_encode_fields_wire_layout():
    sample = _Sample("ab", Ton.NATIONAL, b"xy")
    assert encode_fields(_FIELDS, sample) == b"ab\0\x02\x02xy"


def test_decode_fields_round_trip():
    sample = _Sample("id", Ton.ALPHANUMERIC, b"body", OptionalParameters({OparamTag.SOURCE_PORT: b"\x00\x10"}))
    decoded = decode_fields(_FIELDS, encode_fields(_FIELDS, sample))
    assert _Sample(**decoded) == sample


def test_decode_fields_reports_missing_field():
    with pytest.raises(SmppLengthError, match="field_name:ton"):
        decode_fields(_FIELDS, b"ab\0")