"""HOTP (RFC 4226): code generation and skew-tolerant verification."""

from __future__ import annotations

import logging
from itertools import zip_longest

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives.hmac import HMAC

from otpcore.errors import InvalidCodeLengthError
from otpcore.models import (
    MAX_DIGITS,
    MIN_DIGITS,
    Algorithm,
    HotpOptions,
    SkewWindow,
    VerifyOptions,
    resolve_options,
)
from otpcore.secret import decode_secret

logger = logging.getLogger(__name__)

MAX_COUNTER = 2**64 - 1

_HASHES = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA512: hashes.SHA512,
}


def counter_to_bytes(counter: int) -> bytes:
    """Serialize a counter as 8 bytes, big-endian."""
    if counter < 0 or counter > MAX_COUNTER:
        raise ValueError(f"Counter out of range: {counter}")
    return counter.to_bytes(8, "big")


def hmac_digest(key: bytes, message: bytes, algorithm: Algorithm) -> bytes:
    h = HMAC(key, _HASHES[algorithm]())
    h.update(message)
    return h.finalize()


def dynamic_truncate(digest: bytes) -> int:
    """RFC 4226 section 5.3: pick 4 bytes at the trailing-nibble offset."""
    offset = digest[-1] & 0x0F
    return (
        ((digest[offset] & 0x7F) << 24)
        | (digest[offset + 1] << 16)
        | (digest[offset + 2] << 8)
        | digest[offset + 3]
    )


def generate_hotp_code(
    counter: int,
    secret: str,
    options: HotpOptions | None = None,
    *,
    digits: int | None = None,
    algorithm: Algorithm | str | None = None,
) -> str:
    """Generate the HOTP code for ``counter``.

    The code keeps the rightmost ``digits`` decimal digits of the truncated
    value, left-padded with zeros.

    Raises:
        Base32DecodeError: the secret is not valid Base32.
        InvalidSecretError: the secret decodes to fewer than 10 bytes.
    """
    opts = resolve_options(HotpOptions, options, digits=digits, algorithm=algorithm)
    key = decode_secret(secret)
    message = counter_to_bytes(counter)

    logger.debug("Generating HOTP code (counter=%d, algorithm=%s)", counter, opts.algorithm)
    value = dynamic_truncate(hmac_digest(key, message, opts.algorithm))
    return str(value)[-opts.digits:].rjust(opts.digits, "0")


def constant_time_equals(a: str, b: str) -> bool:
    """Compare two codes without leaking where they first differ."""
    if len(a) != len(b):
        return False
    return constant_time.bytes_eq(a.encode("utf-8"), b.encode("utf-8"))


def candidate_counters(counter: int, skew: SkewWindow) -> list[int]:
    """Reference counter first, then alternate one step back, one forward.

    Steps that would leave the 64-bit counter range are skipped.
    """
    backward = [counter - step for step in range(1, skew.left + 1) if counter - step >= 0]
    forward = [counter + step for step in range(1, skew.right + 1) if counter + step <= MAX_COUNTER]
    candidates = [counter]
    for back, ahead in zip_longest(backward, forward):
        if back is not None:
            candidates.append(back)
        if ahead is not None:
            candidates.append(ahead)
    return candidates


def verify_hotp_code(
    code: str,
    counter: int,
    secret: str,
    options: VerifyOptions | None = None,
    *,
    digits: int | None = None,
    strict_digits: bool | None = None,
    algorithm: Algorithm | str | None = None,
    skew: SkewWindow | dict | None = None,
) -> bool:
    """Check ``code`` against ``counter`` and the skew window around it.

    Codes are generated with as many digits as ``code`` has, unless
    ``strict_digits`` pins the length to ``digits``. Callers must apply
    their own rate limiting.

    Raises:
        InvalidCodeLengthError: ``code`` is not 6-10 characters, or
            ``strict_digits`` was requested without ``digits``.
    """
    if not MIN_DIGITS <= len(code) <= MAX_DIGITS:
        raise InvalidCodeLengthError(
            f"Code length must be between {MIN_DIGITS} and {MAX_DIGITS} digits, got {len(code)}"
        )

    opts = resolve_options(
        VerifyOptions,
        options,
        digits=digits,
        strict_digits=strict_digits,
        algorithm=algorithm,
        skew=skew,
    )

    if opts.strict_digits:
        if opts.digits is None:
            raise InvalidCodeLengthError("strict_digits requires the expected digits length")
        if len(code) != opts.digits:
            return False

    generation = HotpOptions(digits=len(code), algorithm=opts.algorithm)
    for candidate in candidate_counters(counter, opts.skew):
        if constant_time_equals(generate_hotp_code(candidate, secret, generation), code):
            if candidate != counter:
                logger.info("HOTP code accepted with drift of %+d steps", candidate - counter)
            return True
    return False
