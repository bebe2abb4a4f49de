"""Field-level encoding and decoding of SMPP PDU bodies."""

from dataclasses import dataclass
from enum import Enum, auto


class SmppLengthError(ValueError):
    """A field does not fit its limits or the buffer it is read from."""


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


class Cursor:
    """Reads fields one after another from an immutable byte buffer."""

    def __init__(self, data=b""):
        self._data = bytes(data)
        self._pos = 0

    def __len__(self):
        return len(self._data) - self._pos

    def take_u8(self, name):
        if not len(self):
            raise SmppLengthError(f"buf size should be at least 1, field_name:{name}")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def take_c_octet_string(self, max_length, name):
        """Read a null-terminated string shorter than max_length."""
        end = self._data.find(b"\0", self._pos)
        if end < 0:
            raise SmppLengthError(f"c_octet_str can't find null character, field_name:{name}")
        raw = self._data[self._pos:end]
        if len(raw) >= max_length:
            raise SmppLengthError(f"c_octet_str exceed its limit, field_name:{name}")
        self._pos = end + 1
        return raw.decode("latin-1")

    def take_u8_octet_string(self, max_length, name):
        """Read a string preceded by a one-byte length of at most max_length."""
        if not len(self):
            raise SmppLengthError(f"buf size should be at least 1, field_name:{name}")
        length = self._data[self._pos]
        if len(self) <= length:
            raise SmppLengthError(
                f"octet_str buf is smaller than its length field, field_name:{name}"
            )
        raw = self._data[self._pos + 1:self._pos + 1 + length]
        if len(raw) > max_length:
            raise SmppLengthError(f"octet_str exceed its limit, field_name:{name}")
        self._pos += 1 + length
        return raw

    def take_rest(self):
        raw = self._data[self._pos:]
        self._pos = len(self._data)
        return raw


def write_c_octet_string(out, value, max_length, name):
    """Append value and a terminating null byte to out."""
    raw = _as_bytes(value)
    if len(raw) >= max_length:
        raise SmppLengthError(f"c_octet_str exceed its limit, field_name:{name}")
    out += raw + b"\0"


def write_u8_octet_string(out, value, max_length, name):
    """Append a one-byte length followed by value to out."""
    raw = _as_bytes(value)
    if len(raw) > max_length:
        raise SmppLengthError(f"octet_str exceed its limit, field_name:{name}")
    out.append(len(raw))
    out += raw


class FieldKind(Enum):
    ENUM_U8 = auto()
    FLAG = auto()
    U8 = auto()
    SMART = auto()
    C_OCTET_STR = auto()
    U8_OCTET_STR = auto()


@dataclass(frozen=True)
class Field:
    """One wire field of a PDU body: its attribute name, kind and limits."""

    name: str
    kind: FieldKind
    type: type = None
    max_length: int = 0

    def decode(self, cursor):
        match self.kind:
            case FieldKind.ENUM_U8:
                return self.type(cursor.take_u8(self.name))
            case FieldKind.FLAG:
                return self.type.from_byte(cursor.take_u8(self.name))
            case FieldKind.U8:
                return cursor.take_u8(self.name)
            case FieldKind.SMART:
                return self.type.from_bytes(cursor.take_rest())
            case FieldKind.C_OCTET_STR:
                return cursor.take_c_octet_string(self.max_length, self.name)
            case FieldKind.U8_OCTET_STR:
                return cursor.take_u8_octet_string(self.max_length, self.name)
        raise ValueError(f"unknown field kind: {self.kind!r}")

    def encode(self, out, value):
        match self.kind:
            case FieldKind.ENUM_U8 | FieldKind.FLAG | FieldKind.U8:
                out.append(int(value))
            case FieldKind.SMART:
                out += value.encode()
            case FieldKind.C_OCTET_STR:
                write_c_octet_string(out, value, self.max_length, self.name)
            case FieldKind.U8_OCTET_STR:
                write_u8_octet_string(out, value, self.max_length, self.name)
            case _:
                raise ValueError(f"unknown field kind: {self.kind!r}")


def encode_fields(fields, obj):
    """Encode the attributes of obj named by fields, in order."""
    out = bytearray()
    for field in fields:
        field.encode(out, getattr(obj, field.name))
    return bytes(out)


def decode_fields(fields, data):
    """Decode fields in order from data into a name-to-value mapping."""
    cursor = Cursor(data)
    return {field.name: field.decode(cursor) for field in fields}