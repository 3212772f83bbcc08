"""Tests for Luhn check digits."""

from __future__ import annotations

import pytest

from otpcore.luhn import calculate_luhn_checksum, verify_luhn_checksum


@pytest.mark.parametrize(
    "payload,expected",
    [("0", 0), ("1", 8), ("2", 6), ("5", 9), ("9", 1), ("00000", 0), ("10000", 8)],
)
def test_short_payloads(payload, expected):
    assert calculate_luhn_checksum(payload) == expected


def test_longer_payloads():
    assert calculate_luhn_checksum("123456") == 6
    assert calculate_luhn_checksum("987654") == 1
    assert calculate_luhn_checksum("111111") == 1


def test_card_numbers():
    assert calculate_luhn_checksum("424242424242424") == 2
    assert calculate_luhn_checksum("555555555555444") == 4
    assert verify_luhn_checksum("4242424242424242")
    assert verify_luhn_checksum("79927398713")


def test_verify():
    assert verify_luhn_checksum("00")
    assert verify_luhn_checksum("18")
    assert verify_luhn_checksum("1234566")
    assert not verify_luhn_checksum("01")
    assert not verify_luhn_checksum("1234567")


def test_verify_too_short():
    assert not verify_luhn_checksum("")
    assert not verify_luhn_checksum("0")


def test_empty_payload():
    assert calculate_luhn_checksum("") == 0


@pytest.mark.parametrize("payload", ["12a4", "12 34", "-123", "١٢٣"])
def test_non_digits_rejected(payload):
    with pytest.raises(ValueError, match="decimal digits"):
        calculate_luhn_checksum(payload)
