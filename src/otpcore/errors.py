"""Exception taxonomy for OTP generation and verification.

A wrong-but-well-formed code is never an error: verification simply
returns False. Everything here signals malformed input or caller misuse.
"""

from __future__ import annotations


class OtpError(Exception):
    """Base class for every error raised by otpcore."""


class SecretFormatError(OtpError, ValueError):
    """The secret could not be decoded from Base32."""


class Base32DecodeError(SecretFormatError):
    """A character outside the RFC 4648 alphabet was found."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid Base32 character {character!r} at position {position}"
        )


class InvalidSecretError(OtpError, ValueError):
    """The decoded secret is too short to be safe."""

    def __init__(self, message: str = "Invalid or weak secret key") -> None:
        super().__init__(message)


class InvalidCodeLengthError(OtpError, ValueError):
    """The presented code length is unusable, or strict mode was misused."""

    def __init__(self, message: str = "Invalid code length") -> None:
        super().__init__(message)
