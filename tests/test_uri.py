"""Tests for otpauth:// provisioning URLs."""

from __future__ import annotations

import pytest

from otpcore.models import Algorithm, TotpOptions, UrlOptions
from otpcore.uri import generate_totp_url

SECRET = "JBSWY3DPEHPK3PXP"


def test_minimal_url():
    url = generate_totp_url("GitHub", "user@example.com", SECRET)
    assert url == (
        "otpauth://totp/GitHub%3Auser%40example.com"
        "?secret=JBSWY3DPEHPK3PXP&issuer=GitHub"
    )


def test_special_characters_are_encoded():
    url = generate_totp_url("My App", "user+tag@example.com", SECRET)
    assert url.startswith("otpauth://totp/My%20App%3Auser%2Btag%40example.com?")
    assert "issuer=My%20App" in url


def test_unreserved_characters_kept():
    url = generate_totp_url("it's", "a.b_c-d~e", SECRET)
    assert url.startswith("otpauth://totp/it's%3Aa.b_c-d~e?")


def test_optional_parameters():
    url = generate_totp_url("Test", "user", SECRET, digits=8, period=60, algorithm="SHA-512")
    assert url.endswith("&algorithm=SHA512&digits=8&period=60")


def test_algorithm_dashes_removed():
    url = generate_totp_url("Test", "user", SECRET, algorithm=Algorithm.SHA256)
    assert "algorithm=SHA256" in url
    assert "digits" not in url
    assert "period" not in url


def test_options_objects():
    assert generate_totp_url("T", "u", SECRET, UrlOptions(digits=8)).endswith("&digits=8")
    url = generate_totp_url("T", "u", SECRET, TotpOptions())
    assert url.endswith("&algorithm=SHA1&digits=6&period=30")


def test_invalid_digits():
    with pytest.raises(ValueError):
        generate_totp_url("T", "u", SECRET, digits=4)
