"""Conversion of GSM 03.38 and ASCII bodies to UCS-2 big endian."""

_ESCAPE = 0x1B

_GSM_03_38 = (
    "@£$¥èéùìòç\nØø\rÅå"
    "\u0394_\u03a6\u0393\u039b\u03a9\u03a0\u03a8\u03a3\u0398\u039e\u00a0ÆæßÉ"
    " !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

_GSM_03_38_EXTENDED = {
    0x0A: "\x0c",
    0x14: "^",
    0x28: "{",
    0x29: "}",
    0x2F: "\\",
    0x3C: "[",
    0x3D: "~",
    0x3E: "]",
    0x40: "|",
    0x65: "\u20ac",
}


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def convert_gsm_to_ucs2(body):
    """Convert GSM 03.38 septets (one per byte) to UCS-2 big endian bytes.

    Bytes above 127 are skipped; unknown extension characters become spaces.
    """
    chars = []
    extended = False
    for septet in _as_bytes(body):
        if septet > 127:
            continue
        if not extended and septet == _ESCAPE:
            extended = True
            continue
        chars.append(_GSM_03_38_EXTENDED.get(septet, " ") if extended else _GSM_03_38[septet])
        extended = False
    return "".join(chars).encode("utf-16-be")


def convert_ascii_to_ucs2(body):
    """Widen every byte of body to a two-byte UCS-2 big endian unit."""
    return bytes(octet for ch in _as_bytes(body) for octet in (0, ch))