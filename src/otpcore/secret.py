"""Secret generation and decoding."""

from __future__ import annotations

import os

from otpcore import base32
from otpcore.errors import InvalidSecretError

# 80 bits. Shorter keys are refused at generation time.
MIN_SECRET_BYTES = 10
DEFAULT_SECRET_BYTES = 10


def generate_random_secret(byte_length: int = DEFAULT_SECRET_BYTES) -> str:
    """Generate a random Base32 secret without padding.

    Every 5 bytes give 8 characters, so the default 10 bytes yields a
    16-character secret.
    """
    if byte_length < 1:
        raise ValueError(f"byte_length must be positive, got {byte_length}")
    return base32.encode(os.urandom(byte_length), padding=False)


def decode_secret(secret: str) -> bytes:
    """Decode a Base32 secret and refuse keys below MIN_SECRET_BYTES."""
    key = base32.decode(secret)
    if len(key) < MIN_SECRET_BYTES:
        raise InvalidSecretError(
            f"Secret too short: {len(key)} bytes "
            f"(minimum {MIN_SECRET_BYTES} bytes required)"
        )
    return key
