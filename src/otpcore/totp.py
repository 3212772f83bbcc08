"""TOTP (RFC 6238): HOTP over time-step counters, plus period helpers.

Wall-clock time enters only through a ``clock`` callable returning Unix
seconds, so tests can pin "now" instead of sleeping.
"""

from __future__ import annotations

import math
import time
from typing import Callable

from otpcore.hotp import generate_hotp_code, verify_hotp_code
from otpcore.models import (
    DEFAULT_PERIOD,
    Algorithm,
    HotpOptions,
    SkewWindow,
    TotpOptions,
    TotpVerifyOptions,
    VerifyOptions,
    resolve_options,
)

Clock = Callable[[], float]

DEFAULT_SKEW_THRESHOLD = 10


def _now(clock: Clock | None) -> float:
    return (clock or time.time)()


def _check_period(period: int) -> None:
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")


def derive_counter(period: int = DEFAULT_PERIOD, clock: Clock | None = None) -> int:
    """Index of the current time step: floor(now / period)."""
    _check_period(period)
    return math.floor(_now(clock) / period)


def estimate_time_left(period: int = DEFAULT_PERIOD, clock: Clock | None = None) -> int:
    """Seconds until the next period starts, in (0, period]."""
    _check_period(period)
    return period - (math.floor(_now(clock)) % period)


def estimate_skew_allowance(
    period: int = DEFAULT_PERIOD,
    threshold: int = DEFAULT_SKEW_THRESHOLD,
    clock: Clock | None = None,
) -> SkewWindow:
    """Widen the window by one step only near a period boundary.

    Early in a period the previous code may still be in flight (left);
    late in a period the client clock may already be ahead (right).
    """
    remaining = estimate_time_left(period, clock)
    elapsed = period - remaining
    return SkewWindow(
        left=1 if elapsed < threshold else 0,
        right=1 if remaining < threshold else 0,
    )


def generate_totp_code(
    secret: str,
    options: TotpOptions | None = None,
    *,
    digits: int | None = None,
    algorithm: Algorithm | str | None = None,
    period: int | None = None,
    clock: Clock | None = None,
) -> str:
    """Generate the TOTP code for the current time step."""
    opts = resolve_options(TotpOptions, options, digits=digits, algorithm=algorithm, period=period)
    counter = derive_counter(opts.period, clock)
    return generate_hotp_code(counter, secret, resolve_options(HotpOptions, opts))


def verify_totp_code(
    code: str,
    secret: str,
    options: TotpVerifyOptions | None = None,
    *,
    digits: int | None = None,
    strict_digits: bool | None = None,
    algorithm: Algorithm | str | None = None,
    period: int | None = None,
    skew: SkewWindow | dict | None = None,
    clock: Clock | None = None,
) -> bool:
    """Verify a TOTP code against the current time step and its skew window."""
    opts = resolve_options(
        TotpVerifyOptions,
        options,
        digits=digits,
        strict_digits=strict_digits,
        algorithm=algorithm,
        period=period,
        skew=skew,
    )
    counter = derive_counter(opts.period, clock)
    return verify_hotp_code(code, counter, secret, resolve_options(VerifyOptions, opts))
