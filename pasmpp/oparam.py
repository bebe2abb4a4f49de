"""Optional TLV parameters carried at the end of SMPP PDU bodies."""

import struct

from .params import OparamTag

_HEADER = struct.Struct(">HH")
_MAX_VALUE_LENGTH = 0xFFFF


class OptionalParameters:
    """A set of tag/value optional parameters, encoded in ascending tag order."""

    def __init__(self, params=None):
        self._params = {}
        for tag, value in (params or {}).items():
            self.set_string(tag, value)

    @classmethod
    def from_bytes(cls, data):
        """Parse TLVs from data; fewer than four trailing bytes are ignored."""
        params = cls()
        view = memoryview(bytes(data))
        while len(view) >= _HEADER.size:
            tag, length = _HEADER.unpack_from(view)
            if length > len(view) - _HEADER.size:
                raise ValueError("oparam val length is bigger than available buf")
            value = bytes(view[_HEADER.size:_HEADER.size + length])
            params._params.setdefault(OparamTag(tag), value)
            view = view[_HEADER.size + length:]
        return params

    def encode(self):
        return b"".join(
            _HEADER.pack(int(tag), len(value)) + value
            for tag, value in sorted(self._params.items())
        )

    def discard(self, tag):
        self._params.pop(OparamTag(tag), None)

    def __contains__(self, tag):
        return OparamTag(tag) in self._params

    def __len__(self):
        return len(self._params)

    def __iter__(self):
        return iter(sorted(self._params))

    def __eq__(self, other):
        if not isinstance(other, OptionalParameters):
            return NotImplemented
        return self._params == other._params

    def __repr__(self):
        items = ", ".join(f"{tag.name}={value!r}" for tag, value in sorted(self._params.items()))
        return f"OptionalParameters({items})"

    def get_string(self, tag):
        try:
            return self._params[OparamTag(tag)]
        except KeyError:
            raise KeyError(f"oparam doesn't exist: {tag!r}") from None

    def set_string(self, tag, value):
        value = bytes(value)
        if len(value) > _MAX_VALUE_LENGTH:
            raise ValueError("oparam value length is bigger than 65535")
        self._params[OparamTag(tag)] = value

    def get_byte_enum(self, tag, enum_type):
        value = self.get_string(tag)
        return enum_type(value[0] if value else 0)

    def set_byte_enum(self, tag, value):
        self._params[OparamTag(tag)] = bytes([int(value) & 0xFF])