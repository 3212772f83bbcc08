"""Central configuration loaded from environment variables and YAML profiles."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from otpcore.backup_codes import GROUP_SIZES
from otpcore.models import DEFAULT_DIGITS, DEFAULT_PERIOD, Algorithm, AlgorithmField, TotpOptions
from otpcore.secret import DEFAULT_SECRET_BYTES
from otpcore.totp import DEFAULT_SKEW_THRESHOLD

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
PROFILES_DIR = CONFIG_DIR / "profiles"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OTPCORE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Code generation
    default_digits: int = Field(default=DEFAULT_DIGITS, ge=6, le=10)
    default_period: int = Field(default=DEFAULT_PERIOD, ge=1)
    default_algorithm: AlgorithmField = Algorithm.SHA1

    # Secrets
    secret_bytes: int = Field(default=DEFAULT_SECRET_BYTES, ge=10)

    # Verification
    skew_threshold: int = Field(default=DEFAULT_SKEW_THRESHOLD, ge=0)

    # Backup codes
    backup_code_bytes: int = Field(default=DEFAULT_SECRET_BYTES, ge=1)
    backup_code_group: int = 4
    backup_code_count: int = Field(default=8, ge=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Paths
    profiles_dir: Path = Field(default_factory=lambda: PROFILES_DIR)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("backup_code_group")
    @classmethod
    def _check_group(cls, value: int) -> int:
        if value not in GROUP_SIZES:
            raise ValueError(f"backup_code_group must be one of {GROUP_SIZES}")
        return value

    def totp_options(self) -> TotpOptions:
        return TotpOptions(
            digits=self.default_digits,
            period=self.default_period,
            algorithm=self.default_algorithm,
        )


def load_profile(slug: str, profiles_dir: Path | None = None) -> dict[str, Any]:
    """Load an issuer profile YAML by slug name."""
    path = (profiles_dir or settings.profiles_dir) / f"{slug}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_all_profiles(profiles_dir: Path | None = None) -> dict[str, dict[str, Any]]:
    """Load all issuer profiles from the profiles directory."""
    directory = profiles_dir or settings.profiles_dir
    profiles: dict[str, dict[str, Any]] = {}
    if not directory.exists():
        return profiles
    for path in sorted(directory.glob("*.yaml")):
        with open(path) as f:
            profiles[path.stem] = yaml.safe_load(f) or {}
    return profiles


settings = Settings()
