"""User data headers and packing of short_message payloads."""

from dataclasses import dataclass

from .coding import Alphabet, extract_alphabet
from .params import GsmNetworkFeatures

_CONCATENATED_8BIT_REF = 0x00
_CONCATENATED_16BIT_REF = 0x08
_MAX_8_BIT_LENGTH = 160
_MAX_OTHER_LENGTH = 140


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


@dataclass(frozen=True)
class MultiPartData:
    """Concatenation information of one part of a long message."""

    concat_sm_ref_num: int = 0
    number_of_parts: int = 0
    sequence_number: int = 0


class UserDataHeader:
    """An ordered list of user data header information elements."""

    def __init__(self, headers=None):
        self.headers = [(tag, bytes(value)) for tag, value in (headers or ())]

    @classmethod
    def from_bytes(cls, data):
        """Parse information elements; a single trailing byte is ignored."""
        data = bytes(data)
        header = cls()
        pos = 0
        while len(data) - pos >= 2:
            tag, length = data[pos], data[pos + 1]
            if length > len(data) - pos - 2:
                raise ValueError("user_data_header val length is bigger than available buf")
            value = data[pos + 2:pos + 2 + length]
            if (tag == _CONCATENATED_8BIT_REF and len(value) != 3) or (
                tag == _CONCATENATED_16BIT_REF and len(value) != 4
            ):
                raise ValueError("user_data_header multi_part_data length is invalid")
            header.headers.append((tag, value))
            pos += 2 + length
        return header

    def encode(self):
        return b"".join(bytes([tag, len(value) & 0xFF]) + value for tag, value in self.headers)

    def set_multi_part_data(self, mpd):
        parts = mpd.number_of_parts & 0xFF
        sequence = mpd.sequence_number & 0xFF
        ref = mpd.concat_sm_ref_num & 0xFFFF
        if ref > 0xFF:
            self.headers.append(
                (_CONCATENATED_16BIT_REF, bytes([ref >> 8, ref & 0xFF, parts, sequence]))
            )
        else:
            self.headers.append((_CONCATENATED_8BIT_REF, bytes([ref, parts, sequence])))

    def multi_part_data(self):
        """Return the concatenation data, or a single-part default when absent."""
        for tag, value in self.headers:
            if tag == _CONCATENATED_8BIT_REF:
                return MultiPartData(value[0], value[1], value[2])
        for tag, value in self.headers:
            if tag == _CONCATENATED_16BIT_REF:
                return MultiPartData(value[0] << 8 | value[1], value[2], value[3])
        return MultiPartData(0, 1, 1)

    def __eq__(self, other):
        if not isinstance(other, UserDataHeader):
            return NotImplemented
        return self.headers == other.headers

    def __repr__(self):
        return f"UserDataHeader({self.headers!r})"


def _check_length(data_coding, short_message, action):
    if extract_alphabet(data_coding) == Alphabet.ASCII_8_BIT:
        limit = _MAX_8_BIT_LENGTH
    else:
        limit = _MAX_OTHER_LENGTH
    if len(short_message) > limit:
        raise ValueError(
            f"{action} short_message failed, short_message length is larger than {limit}"
        )


def unpack_short_message(esm_class, data_coding, short_message):
    """Split a short_message into its user data header and body."""
    short_message = _as_bytes(short_message)
    _check_length(data_coding, short_message, "unpacking")

    if esm_class.gsm_network_features in (GsmNetworkFeatures.UDHI, GsmNetworkFeatures.BOTH):
        udh_length = short_message[0] if short_message else 0
        if udh_length >= len(short_message):
            raise ValueError(
                "unpacking short_message failed, UDH length is larger than short_message"
            )
        return (
            UserDataHeader.from_bytes(short_message[1:1 + udh_length]),
            short_message[1 + udh_length:],
        )

    return UserDataHeader(), short_message


def pack_short_message(header, body, data_coding):
    """Join a user data header and body into one short_message."""
    encoded = header.encode()
    short_message = (bytes([len(encoded) & 0xFF]) + encoded if encoded else b"") + _as_bytes(body)
    _check_length(data_coding, short_message, "packing")
    return short_message