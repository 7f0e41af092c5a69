"""
Configuration management for the aggregation components.

Provides typed configuration classes with environment variable
injection and validation.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Any

from shared.utils.errors import ConfigurationError


ENVIRONMENTS = ("local", "dev", "staging", "prod")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("json", "console")


@dataclass
class ObservabilityConfig:
    """Observability configuration."""
    log_level: str = field(default_factory=lambda: os.getenv("DATA_PROC_LOG_LEVEL", "info"))
    log_format: str = field(default_factory=lambda: os.getenv("DATA_PROC_LOG_FORMAT", "json"))

    def __post_init__(self):
        if self.log_level.lower() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}",
                config_key="log_level",
                config_value=self.log_level,
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid log format: {self.log_format}",
                config_key="log_format",
                config_value=self.log_format,
            )


@dataclass
class ServiceConfig:
    """Base service configuration."""
    service_name: str
    environment: str = field(default_factory=lambda: os.getenv("DATA_PROC_ENV", "local"))

    # Sub-configurations
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.service_name:
            raise ConfigurationError("service_name is required", config_key="service_name")

        if self.environment not in ENVIRONMENTS:
            raise ConfigurationError(
                f"Invalid environment: {self.environment}",
                config_key="environment",
                config_value=self.environment,
            )

    @classmethod
    def from_env(cls, service_name: str) -> "ServiceConfig":
        """Create configuration from environment variables."""
        return cls(service_name=service_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "service_name": self.service_name,
            "environment": self.environment,
            "observability": {
                "log_level": self.observability.log_level,
                "log_format": self.observability.log_format,
            },
        }
