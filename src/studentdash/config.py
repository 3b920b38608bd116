"""Environment-driven configuration for studentdash."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_DB_PATH = "studentdash.db"
DEFAULT_CATALOG_DELAY = 0.8
DEFAULT_CATALOG_FAILURE_RATE = 0.05


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class Settings:
    """Runtime settings.

    Attributes:
        db_path: SQLite file holding the persisted collection. ":memory:" keeps
                 everything in process.
        catalog_delay: Simulated latency of the course catalog fetch, in seconds.
        catalog_failure_rate: Probability that a catalog fetch fails.
    """

    db_path: str = DEFAULT_DB_PATH
    catalog_delay: float = DEFAULT_CATALOG_DELAY
    catalog_failure_rate: float = DEFAULT_CATALOG_FAILURE_RATE

    def __post_init__(self) -> None:
        if self.catalog_delay < 0:
            raise ConfigError(f"catalog_delay must be >= 0, got {self.catalog_delay}")
        if not 0.0 <= self.catalog_failure_rate <= 1.0:
            raise ConfigError(
                f"catalog_failure_rate must be between 0 and 1, got {self.catalog_failure_rate}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from STUDENTDASH_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If a value cannot be parsed or is out of range.
        """
        env = os.environ if environ is None else environ
        return cls(
            db_path=env.get("STUDENTDASH_DB_PATH", DEFAULT_DB_PATH),
            catalog_delay=_parse_float(env, "STUDENTDASH_CATALOG_DELAY", DEFAULT_CATALOG_DELAY),
            catalog_failure_rate=_parse_float(
                env, "STUDENTDASH_CATALOG_FAILURE_RATE", DEFAULT_CATALOG_FAILURE_RATE
            ),
        )


def _parse_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
