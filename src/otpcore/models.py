"""Value types and option models shared by the OTP functions."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

MIN_DIGITS = 6
MAX_DIGITS = 10
DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30

# Only 6 and 8 digits are known to work with third-party authenticator apps.
INTEROPERABLE_DIGITS = (6, 8)


class Algorithm(StrEnum):
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA512 = "SHA-512"

    @classmethod
    def parse(cls, value: str | Algorithm) -> Algorithm:
        """Accept "SHA-256", "SHA256" or "sha256"."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().upper().replace("-", "").replace("_", "")
        for member in cls:
            if member.uri_name == normalized:
                return member
        raise ValueError(f"Unsupported algorithm: {value!r}")

    @property
    def uri_name(self) -> str:
        """Dashless spelling used by otpauth:// URLs."""
        return self.value.replace("-", "")


def _coerce_algorithm(value: Any) -> Any:
    if isinstance(value, str):
        return Algorithm.parse(value)
    return value


AlgorithmField = Annotated[Algorithm, BeforeValidator(_coerce_algorithm)]


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SkewWindow(_Options):
    """How many steps to search backward (left) and forward (right)."""

    left: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)


class HotpOptions(_Options):
    digits: int = Field(default=DEFAULT_DIGITS, ge=MIN_DIGITS, le=MAX_DIGITS)
    algorithm: AlgorithmField = Algorithm.SHA1


class TotpOptions(HotpOptions):
    period: int = Field(default=DEFAULT_PERIOD, ge=1)


class VerifyOptions(_Options):
    # Expected length, only enforced when strict_digits is set.
    digits: int | None = Field(default=None, ge=MIN_DIGITS, le=MAX_DIGITS)
    strict_digits: bool = False
    algorithm: AlgorithmField = Algorithm.SHA1
    skew: SkewWindow = Field(default_factory=SkewWindow)


class TotpVerifyOptions(VerifyOptions):
    period: int = Field(default=DEFAULT_PERIOD, ge=1)


def resolve_options(model: type[_Options], options: BaseModel | None, **fields: Any) -> Any:
    """Build ``model`` from an options object plus keyword overrides.

    Keywords left as None fall back to ``options``, then to the model
    defaults. Fields ``options`` has but ``model`` lacks, and fields it leaves
    as None, are dropped, so a TotpVerifyOptions can be handed to a
    generation function.
    """
    overrides = {k: v for k, v in fields.items() if v is not None}
    if options is None:
        return model(**overrides)
    if not overrides and type(options) is model:
        return options
    values = {
        k: getattr(options, k)
        for k in model.model_fields
        if k in type(options).model_fields and getattr(options, k) is not None
    }
    values.update(overrides)
    return model(**values)


class UrlOptions(_Options):
    # Unset fields are left out of the URL.
    digits: int | None = Field(default=None, ge=MIN_DIGITS, le=MAX_DIGITS)
    period: int | None = Field(default=None, ge=1)
    algorithm: AlgorithmField | None = None
