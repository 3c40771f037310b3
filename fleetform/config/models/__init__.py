"""Configuration model exports.

    from fleetform.config.models import FormattingConfig, ObservabilityConfig
"""

from fleetform.config.models.formatting import FormattingConfig
from fleetform.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "FormattingConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
