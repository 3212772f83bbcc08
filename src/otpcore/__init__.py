"""otpcore: HOTP/TOTP one-time passwords and the Base32 codec behind them."""

from otpcore.backup_codes import generate_backup_codes, generate_single_backup_code
from otpcore.base32 import decode as decode_base32
from otpcore.base32 import encode as encode_base32
from otpcore.errors import (
    Base32DecodeError,
    InvalidCodeLengthError,
    InvalidSecretError,
    OtpError,
    SecretFormatError,
)
from otpcore.hotp import generate_hotp_code, verify_hotp_code
from otpcore.luhn import calculate_luhn_checksum, verify_luhn_checksum
from otpcore.models import (
    Algorithm,
    HotpOptions,
    SkewWindow,
    TotpOptions,
    TotpVerifyOptions,
    UrlOptions,
    VerifyOptions,
)
from otpcore.secret import generate_random_secret
from otpcore.totp import (
    estimate_skew_allowance,
    estimate_time_left,
    generate_totp_code,
    verify_totp_code,
)
from otpcore.uri import generate_totp_url

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "Base32DecodeError",
    "HotpOptions",
    "InvalidCodeLengthError",
    "InvalidSecretError",
    "OtpError",
    "SecretFormatError",
    "SkewWindow",
    "TotpOptions",
    "TotpVerifyOptions",
    "UrlOptions",
    "VerifyOptions",
    "calculate_luhn_checksum",
    "decode_base32",
    "encode_base32",
    "estimate_skew_allowance",
    "estimate_time_left",
    "generate_backup_codes",
    "generate_hotp_code",
    "generate_random_secret",
    "generate_single_backup_code",
    "generate_totp_code",
    "generate_totp_url",
    "verify_hotp_code",
    "verify_luhn_checksum",
    "verify_totp_code",
]
