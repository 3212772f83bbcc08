"""CLI playground for otpcore."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from otpcore import config
from otpcore.backup_codes import GROUP_SIZES, generate_backup_codes
from otpcore.errors import OtpError
from otpcore.hotp import generate_hotp_code
from otpcore.luhn import calculate_luhn_checksum
from otpcore.models import Algorithm, SkewWindow, TotpOptions
from otpcore.secret import generate_random_secret
from otpcore.totp import (
    estimate_skew_allowance,
    estimate_time_left,
    generate_totp_code,
    verify_totp_code,
)
from otpcore.uri import generate_totp_url

console = Console()

ALGORITHM_CHOICES = click.Choice(
    [a.value for a in Algorithm] + [a.uri_name for a in Algorithm], case_sensitive=False
)
DIGIT_RANGE = click.IntRange(6, 10)


def _emit(value: str) -> None:
    """Print a machine-readable value without wrapping or markup."""
    console.print(value, soft_wrap=True, markup=False, highlight=False)


def _fail(err: Exception) -> NoReturn:
    console.print(f"[red]{escape(str(err))}[/red]")
    sys.exit(2)


def _totp_options(digits: int | None, period: int | None, algorithm: str | None) -> TotpOptions:
    base = config.settings.totp_options()
    return TotpOptions(
        digits=digits or base.digits,
        period=period or base.period,
        algorithm=Algorithm.parse(algorithm) if algorithm else base.algorithm,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """otpcore: HOTP/TOTP one-time passwords."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


@main.command()
@click.argument("issuer")
@click.argument("account")
@click.option("--profile", help="Issuer profile supplying digits/period/algorithm.")
@click.option("--digits", type=DIGIT_RANGE)
@click.option("--period", type=click.IntRange(min=1))
@click.option("--algorithm", type=ALGORITHM_CHOICES)
@click.option("--bytes", "byte_length", type=click.IntRange(min=10), help="Secret length in bytes.")
def new(
    issuer: str,
    account: str,
    profile: str | None,
    digits: int | None,
    period: int | None,
    algorithm: str | None,
    byte_length: int | None,
) -> None:
    """Generate a new secret and its otpauth:// URL."""
    if profile:
        try:
            cfg = config.load_profile(profile)
        except FileNotFoundError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            sys.exit(1)
        digits = digits or cfg.get("digits")
        period = period or cfg.get("period")
        algorithm = algorithm or cfg.get("algorithm")

    secret = generate_random_secret(byte_length or config.settings.secret_bytes)
    try:
        url = generate_totp_url(issuer, account, secret, digits=digits, period=period, algorithm=algorithm)
    except ValueError as e:
        _fail(e)

    console.print("[bold]Secret[/bold]")
    _emit(secret)
    console.print("[bold]URL[/bold]")
    _emit(url)


@main.command()
@click.argument("secret")
@click.option("--digits", type=DIGIT_RANGE)
@click.option("--period", type=click.IntRange(min=1))
@click.option("--algorithm", type=ALGORITHM_CHOICES)
def code(secret: str, digits: int | None, period: int | None, algorithm: str | None) -> None:
    """Print the current TOTP code for SECRET."""
    opts = _totp_options(digits, period, algorithm)
    try:
        current = generate_totp_code(secret, opts)
    except OtpError as e:
        _fail(e)
    _emit(current)
    console.print(f"[dim]valid for {estimate_time_left(opts.period)}s[/dim]")


@main.command()
@click.argument("secret")
@click.argument("counter", type=click.IntRange(min=0))
@click.option("--digits", type=DIGIT_RANGE)
@click.option("--algorithm", type=ALGORITHM_CHOICES)
def hotp(secret: str, counter: int, digits: int | None, algorithm: str | None) -> None:
    """Print the HOTP code for SECRET at COUNTER."""
    opts = _totp_options(digits, None, algorithm)
    try:
        _emit(generate_hotp_code(counter, secret, digits=opts.digits, algorithm=opts.algorithm))
    except OtpError as e:
        _fail(e)


@main.command()
@click.argument("code_", metavar="CODE")
@click.argument("secret")
@click.option("--digits", type=DIGIT_RANGE, help="Require exactly this many digits.")
@click.option("--period", type=click.IntRange(min=1))
@click.option("--algorithm", type=ALGORITHM_CHOICES)
@click.option("--skew-left", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--skew-right", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--auto-skew", is_flag=True, help="Widen the window only near a period boundary.")
def verify(
    code_: str,
    secret: str,
    digits: int | None,
    period: int | None,
    algorithm: str | None,
    skew_left: int,
    skew_right: int,
    auto_skew: bool,
) -> None:
    """Verify a TOTP CODE against SECRET. Exits 0 when valid, 1 otherwise."""
    opts = _totp_options(None, period, algorithm)
    if auto_skew:
        skew = estimate_skew_allowance(opts.period, config.settings.skew_threshold)
    else:
        skew = SkewWindow(left=skew_left, right=skew_right)

    try:
        valid = verify_totp_code(
            code_,
            secret,
            digits=digits,
            strict_digits=digits is not None,
            algorithm=opts.algorithm,
            period=opts.period,
            skew=skew,
        )
    except OtpError as e:
        _fail(e)

    if valid:
        console.print("[green]valid[/green]")
        return
    console.print("[red]invalid[/red]")
    sys.exit(1)


@main.command()
@click.option("--bytes", "byte_length", type=click.IntRange(min=1))
@click.option("--group-by", type=click.Choice([str(g) for g in GROUP_SIZES]))
@click.option("--count", type=click.IntRange(min=1))
def backup(byte_length: int | None, group_by: str | None, count: int | None) -> None:
    """Generate paper backup codes."""
    s = config.settings
    for c in generate_backup_codes(
        count or s.backup_code_count,
        byte_length or s.backup_code_bytes,
        int(group_by) if group_by else s.backup_code_group,
    ):
        _emit(c)


@main.command()
@click.argument("payload")
def luhn(payload: str) -> None:
    """Append the Luhn check digit to PAYLOAD."""
    try:
        _emit(f"{payload}{calculate_luhn_checksum(payload)}")
    except ValueError as e:
        _fail(e)


@main.command()
def status() -> None:
    """Show effective settings."""
    s = config.settings
    console.print("[bold]otpcore settings[/bold]")
    console.print(f"  Digits: {s.default_digits}")
    console.print(f"  Period: {s.default_period}s")
    console.print(f"  Algorithm: {s.default_algorithm}")
    console.print(f"  Secret bytes: {s.secret_bytes}")
    console.print(f"  Skew threshold: {s.skew_threshold}s")
    console.print(f"  Profiles: {s.profiles_dir}")


@main.command()
def profiles() -> None:
    """List issuer profiles."""
    found = config.load_all_profiles()
    if not found:
        console.print("[yellow]No profiles found[/yellow]")
        return
    table = Table("Profile", "Issuer", "Digits", "Period", "Algorithm")
    for slug, cfg in found.items():
        table.add_row(
            slug,
            str(cfg.get("issuer", "")),
            str(cfg.get("digits", "")),
            str(cfg.get("period", "")),
            str(cfg.get("algorithm", "")),
        )
    console.print(table)


if __name__ == "__main__":
    main()
