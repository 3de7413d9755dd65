"""Configuration module for dp_numerics."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import yaml

DEFAULT_EPSILON = math.log(3)
DEFAULT_PERCENTILES: tuple[float, ...] = (0.05, 0.25, 0.5, 0.75, 0.95)

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class PrivacyConfig:
    """Privacy defaults handed to the mechanism layer.

    Attributes
    ----------
        default_epsilon: float
            Privacy budget used when a caller does not choose one.

    Raises
    ------
        ValueError: If default_epsilon is not finite and positive.
    """

    default_epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if not (math.isfinite(self.default_epsilon) and self.default_epsilon > 0):
            msg = f"default_epsilon must be finite and > 0, got {self.default_epsilon}"
            raise ValueError(msg)


@dataclass(frozen=True)
class StatisticsConfig:
    """Parameters for sample summaries used to validate noise distributions.

    Attributes
    ----------
        summary_percentiles: tuple[float, ...]
            Order statistics reported by ``summarize``.

    Raises
    ------
        ValueError: If any percentile is outside [0, 1].
    """

    summary_percentiles: tuple[float, ...] = DEFAULT_PERCENTILES

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        # YAML hands back lists; keep the dataclass hashable.
        object.__setattr__(self, "summary_percentiles", tuple(self.summary_percentiles))
        for p in self.summary_percentiles:
            if not (0.0 <= p <= 1.0):
                msg = f"summary percentiles must be in [0,1], got {p}"
                raise ValueError(msg)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging parameters.

    Attributes
    ----------
        level: str
            Level name applied to the ``dp_numerics`` logger.
    """

    level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.level.upper() not in _LEVELS:
            msg = f"level must be one of {_LEVELS}, got {self.level!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Config:
    """
    Top-level configuration for dp_numerics.

    Groups
    ----------
        privacy: PrivacyConfig
            Privacy defaults.
        statistics: StatisticsConfig
            Sample summary parameters.
        logging: LoggingConfig
            Logging parameters.

    Raises
    ------
        ValueError: If any of the sub-configs contain invalid values.
    """

    privacy: PrivacyConfig = field(default_factory=PrivacyConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    DEFAULT_EPSILON: ClassVar[float] = DEFAULT_EPSILON

    def to_dict(self) -> dict[str, Any]:
        """Recursively convert to plain dict (for logging, serialization)."""
        data = asdict(self)
        data["statistics"]["summary_percentiles"] = list(self.statistics.summary_percentiles)
        return data

    def to_yaml(self) -> str:
        """Dump entire config as a YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build Config by unpacking each sub-dict into its sub-config."""
        return cls(
            privacy=PrivacyConfig(**data.get("privacy", {})),
            statistics=StatisticsConfig(**data.get("statistics", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a YAML file and return a Config."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})


def default_epsilon(config: Config | None = None) -> float:
    """Return the default privacy budget, ``ln 3`` unless configured."""
    if config is None:
        return DEFAULT_EPSILON
    return config.privacy.default_epsilon


def configure_logging(config: Config) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    logger = logging.getLogger("dp_numerics")
    logger.setLevel(config.logging.level.upper())
    return logger
