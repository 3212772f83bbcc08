"""RFC 4648 Base32 codec.

Bytes are treated as one contiguous bit stream and consumed five bits at a
time, most significant bit first. Lookup is table-driven in both directions.
"""

from __future__ import annotations

from otpcore.errors import Base32DecodeError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PADDING = "="

_ENCODE_TABLE = ALPHABET.encode("ascii")

# ASCII code -> 5-bit value, -1 for characters outside the alphabet.
_DECODE_TABLE = [-1] * 128
for _value, _char in enumerate(ALPHABET):
    _DECODE_TABLE[ord(_char)] = _value
    _DECODE_TABLE[ord(_char.lower())] = _value
del _value, _char


def encode(data: bytes, padding: bool = True) -> str:
    """Encode bytes to Base32 text, optionally ``=``-padded to a multiple of 8."""
    if not data:
        return ""

    out = bytearray()
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(_ENCODE_TABLE[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1

    if bits:
        # Left-align the final partial group.
        out.append(_ENCODE_TABLE[(buffer << (5 - bits)) & 0x1F])

    if padding:
        out.extend(b"=" * (-len(out) % 8))
    return out.decode("ascii")


def decode(text: str) -> bytes:
    """Decode Base32 text (case-insensitive) back to bytes.

    Decoding stops at the first ``=``. Bits that do not complete a byte are
    dropped. Raises Base32DecodeError on any character outside the alphabet.
    """
    out = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(text):
        if char == PADDING:
            break
        code = ord(char)
        value = _DECODE_TABLE[code] if code < 128 else -1
        if value < 0:
            raise Base32DecodeError(char, position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return bytes(out)
