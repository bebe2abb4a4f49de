import pytest

from pasmpp.params import DataCoding, EsmClass, GsmNetworkFeatures
from pasmpp.short_message import (
    MultiPartData,
    UserDataHeader,
    pack_short_message,
    unpack_short_message,
)

UDHI = EsmClass(gsm_network_features=GsmNetworkFeatures.UDHI)


def test_default_multi_part_data():
    assert UserDataHeader().multi_part_data() == MultiPartData(0, 1, 1)


def test_8bit_reference_wire_format():
    header = UserDataHeader()
    header.set_multi_part_data(MultiPartData(5, 3, 2))
    assert header.encode() == bytes([0x00, 3, 5, 3, 2])
    assert header.multi_part_data() == MultiPartData(5, 3, 2)


def test_16bit_reference_wire_format():
    header = UserDataHeader()
    header.set_multi_part_data(MultiPartData(0x1234, 3, 2))
    assert header.encode() == bytes([0x08, 4, 0x12, 0x34, 3, 2])
    assert header.multi_part_data() == MultiPartData(0x1234, 3, 2)


def test_header_round_trip():
    header = UserDataHeader([(0x05, b"\x01\x02\x03\x04")])
    header.set_multi_part_data(MultiPartData(200, 4, 4))
    assert UserDataHeader.from_bytes(header.encode()) == header


def test_invalid_multi_part_length():
    with pytest.raises(ValueError):
        UserDataHeader.from_bytes(bytes([0x00, 2, 1, 1]))


def test_value_length_beyond_buffer():
    with pytest.raises(ValueError):
        UserDataHeader.from_bytes(bytes([0x05, 9, 1]))


def test_pack_unpack_round_trip_with_udh():
    header = UserDataHeader()
    header.set_multi_part_data(MultiPartData(7, 2, 1))
    packed = pack_short_message(header, b"hello", DataCoding.DEFAULTS)
    assert packed[0] == len(header.encode())
    unpacked_header, body = unpack_short_message(UDHI, DataCoding.DEFAULTS, packed)
    assert unpacked_header == header
    assert body == b"hello"


def test_pack_without_header_is_body():
    assert pack_short_message(UserDataHeader(), b"hello", DataCoding.UCS2) == b"hello"


def test_unpack_without_udhi():
    header, body = unpack_short_message(EsmClass(), DataCoding.DEFAULTS, b"plain")
    assert header == UserDataHeader()
    assert body == b"plain"


def test_unpack_udh_length_too_large():
    with pytest.raises(ValueError):
        unpack_short_message(UDHI, DataCoding.DEFAULTS, bytes([5, 0, 1]))


@pytest.mark.parametrize(
    "data_coding, allowed",
    [(DataCoding.DEFAULTS, 160), (DataCoding.UCS2, 140)],
)
def test_length_limits(data_coding, allowed):
    assert len(pack_short_message(UserDataHeader(), b"a" * allowed, data_coding)) == allowed
    with pytest.raises(ValueError):
        pack_short_message(UserDataHeader(), b"a" * (allowed + 1), data_coding)
    with pytest.raises(ValueError):
        unpack_short_message(EsmClass(), data_coding, b"a" * (allowed + 1))