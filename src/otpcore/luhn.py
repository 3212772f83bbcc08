"""Luhn (mod 10) check digits, e.g. for appending to backup codes."""

from __future__ import annotations

# Digit after doubling and summing its digits.
_DOUBLED = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


def _digits(value: str) -> list[int]:
    if any(c not in "0123456789" for c in value):
        raise ValueError(f"Expected only decimal digits, got {value!r}")
    return [int(c) for c in value]


def calculate_luhn_checksum(payload: str) -> int:
    """Return the check digit to append to ``payload``.

    >>> calculate_luhn_checksum("123456")
    6
    """
    digits = _digits(payload)
    total = 0
    # The rightmost payload digit is doubled.
    for i, digit in enumerate(reversed(digits)):
        total += _DOUBLED[digit] if i % 2 == 0 else digit
    return (10 - total % 10) % 10


def verify_luhn_checksum(digits: str) -> bool:
    """True when the last digit is the Luhn check digit of the rest."""
    if len(digits) < 2:
        return False
    return calculate_luhn_checksum(digits[:-1]) == _digits(digits[-1])[0]
