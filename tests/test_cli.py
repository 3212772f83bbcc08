"""Tests for the command-line playground."""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from otpcore.cli import main
from otpcore.config import Settings
from otpcore.hotp import generate_hotp_code
from otpcore.totp import generate_totp_code

SECRET = "JBSWY3DPEHPK3PXP"


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setattr("otpcore.config.settings", Settings(_env_file=None))
    return CliRunner()


def test_hotp(runner):
    result = runner.invoke(main, ["hotp", SECRET, "42"])
    assert result.exit_code == 0
    assert result.output.strip() == "090604"


def test_hotp_digits(runner):
    result = runner.invoke(main, ["hotp", SECRET, "42", "--digits", "8"])
    assert result.output.strip() == "79090604"


def test_hotp_short_secret(runner):
    result = runner.invoke(main, ["hotp", "SHORT", "0"])
    assert result.exit_code == 2
    assert "Secret too short" in result.output


def test_code(runner):
    result = runner.invoke(main, ["code", SECRET])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert re.fullmatch(r"\d{6}", lines[0])
    assert re.fullmatch(r"valid for \d+s", lines[1])


def test_verify_valid(runner):
    code = generate_totp_code(SECRET)
    result = runner.invoke(main, ["verify", code, SECRET, "--skew-left", "1"])
    assert result.exit_code == 0
    assert "valid" in result.output


def test_verify_invalid(runner):
    result = runner.invoke(main, ["verify", generate_hotp_code(0, SECRET), SECRET])
    assert result.exit_code == 1
    assert "invalid" in result.output


def test_verify_strict_digits(runner):
    code = generate_totp_code(SECRET)
    result = runner.invoke(main, ["verify", code, SECRET, "--digits", "8", "--auto-skew"])
    assert result.exit_code == 1


def test_verify_bad_length(runner):
    result = runner.invoke(main, ["verify", "12345", SECRET])
    assert result.exit_code == 2
    assert "between 6 and 10" in result.output


def test_new(runner):
    result = runner.invoke(main, ["new", "GitHub", "alice@example.com"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    secret = lines[lines.index("Secret") + 1]
    assert re.fullmatch(r"[A-Z2-7]{16}", secret)
    assert f"otpauth://totp/GitHub%3Aalice%40example.com?secret={secret}&issuer=GitHub" in result.output


def test_new_with_profile(runner):
    result = runner.invoke(main, ["new", "Acme", "bob", "--profile", "strict", "--bytes", "20"])
    assert result.exit_code == 0
    assert "&algorithm=SHA256&digits=8&period=30" in result.output
    assert re.search(r"secret=[A-Z2-7]{32}&", result.output)


def test_new_missing_profile(runner):
    result = runner.invoke(main, ["new", "Acme", "bob", "--profile", "nonexistent_xyz"])
    assert result.exit_code == 1
    assert "Profile not found" in result.output


def test_new_rejects_weak_secret_length(runner):
    result = runner.invoke(main, ["new", "Acme", "bob", "--bytes", "5"])
    assert result.exit_code != 0


def test_backup(runner):
    result = runner.invoke(main, ["backup", "--count", "3", "--group-by", "4"])
    assert result.exit_code == 0
    codes = result.output.split()
    assert len(codes) == 3
    for c in codes:
        assert re.fullmatch(r"([A-Z2-7]{4}-){3}[A-Z2-7]{4}", c)


def test_backup_defaults(runner):
    result = runner.invoke(main, ["backup"])
    assert len(result.output.split()) == 8


def test_lowercase_log_level(monkeypatch):
    monkeypatch.setattr("otpcore.config.settings", Settings(_env_file=None, log_level="info"))
    result = CliRunner().invoke(main, ["hotp", SECRET, "42"])
    assert result.exit_code == 0
    assert result.output.strip() == "090604"


def test_luhn(runner):
    result = runner.invoke(main, ["luhn", "123456"])
    assert result.output.strip() == "1234566"


def test_luhn_rejects_letters(runner):
    result = runner.invoke(main, ["luhn", "12ab"])
    assert result.exit_code == 2


def test_status(runner):
    result = runner.invoke(main, ["status"])
    assert result.exit_code == 0
    assert "Digits: 6" in result.output
    assert "Algorithm: SHA-1" in result.output


def test_profiles(runner):
    result = runner.invoke(main, ["profiles"])
    assert result.exit_code == 0
    assert "github" in result.output
    assert "GitHub" in result.output


def test_profiles_empty(runner, monkeypatch, tmp_path):
    monkeypatch.setattr("otpcore.config.settings", Settings(_env_file=None, profiles_dir=tmp_path))
    result = runner.invoke(main, ["profiles"])
    assert "No profiles found" in result.output
