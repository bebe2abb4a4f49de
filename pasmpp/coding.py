"""Classify a data_coding value by the alphabet of its payload."""

from enum import Enum, auto

_GROUP_MASK = 0xF0
_ALPHABET_MASK = 0x0C
_CODING_MASK = 0x0F


class Alphabet(Enum):
    ASCII_7_BIT = auto()
    ASCII_8_BIT = auto()
    BINARY = auto()
    UCS2 = auto()


_GENERAL_GROUP_CODINGS = {
    **dict.fromkeys((0x00, 0x01, 0x03, 0x05, 0x06, 0x07, 0x0D, 0x0E, 0x0B, 0x0C, 0x0F), Alphabet.ASCII_8_BIT),
    **dict.fromkeys((0x02, 0x04, 0x09, 0x0A), Alphabet.BINARY),
    0x08: Alphabet.UCS2,
}

_GENERAL_AND_DELETION_GROUPS = frozenset((0x10, 0x20, 0x30, 0x40, 0x50, 0x60, 0x70))


def extract_alphabet(data_coding):
    """Return the alphabet a data_coding octet designates."""
    value = int(data_coding) & 0xFF
    group = value & _GROUP_MASK

    if group == 0x00:
        return _GENERAL_GROUP_CODINGS.get(value & _CODING_MASK, Alphabet.ASCII_7_BIT)

    if group in _GENERAL_AND_DELETION_GROUPS:
        alphabet = value & _ALPHABET_MASK
        if alphabet == 0x04:
            return Alphabet.BINARY
        if alphabet == 0x08:
            return Alphabet.UCS2
        return Alphabet.ASCII_7_BIT

    if group == 0xE0:
        return Alphabet.UCS2

    if group == 0xF0:
        return Alphabet.BINARY if value & 0x04 else Alphabet.ASCII_7_BIT

    return Alphabet.ASCII_7_BIT