from .config import (
    DEFAULT_EPSILON,
    DEFAULT_PERCENTILES,
    Config,
    LoggingConfig,
    PrivacyConfig,
    StatisticsConfig,
    configure_logging,
    default_epsilon,
)

__all__ = [
    "DEFAULT_EPSILON",
    "DEFAULT_PERCENTILES",
    "Config",
    "LoggingConfig",
    "PrivacyConfig",
    "StatisticsConfig",
    "configure_logging",
    "default_epsilon",
]
