"""otpauth:// provisioning URLs for authenticator apps."""

from __future__ import annotations

from urllib.parse import quote

from otpcore.models import Algorithm, UrlOptions, resolve_options

# Same safe set as JavaScript's encodeURIComponent.
_SAFE = "-_.!~*'()"


def generate_totp_url(
    issuer: str,
    account: str,
    secret: str,
    options: UrlOptions | None = None,
    *,
    digits: int | None = None,
    period: int | None = None,
    algorithm: Algorithm | str | None = None,
) -> str:
    """Build an ``otpauth://totp/`` URL, ready to be rendered as a QR code.

    Optional parameters are only emitted when given, so apps fall back to
    their own defaults (SHA1, 6 digits, 30 seconds).
    """
    opts = resolve_options(UrlOptions, options, digits=digits, period=period, algorithm=algorithm)

    label = quote(f"{issuer}:{account}", safe=_SAFE)
    url = f"otpauth://totp/{label}?secret={secret}&issuer={quote(issuer, safe=_SAFE)}"
    if opts.algorithm is not None:
        url += f"&algorithm={opts.algorithm.uri_name}"
    if opts.digits is not None:
        url += f"&digits={opts.digits}"
    if opts.period is not None:
        url += f"&period={opts.period}"
    return url
