"""
SEPA Validator - Configuration Management

Configuration for the validator, loadable from a YAML file or from
environment variables.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from pathlib import Path
from enum import Enum
import logging

from .exceptions import ConfigurationException
from ..sepa_codes import MessageKind, PAIN_001_SCHEMA_URL, PAIN_008_SCHEMA_URL

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Environment types for configuration."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class SchemaConfig:
    """XSD retrieval and validation settings."""

    credit_transfer_url: str = PAIN_001_SCHEMA_URL
    direct_debit_url: str = PAIN_008_SCHEMA_URL
    fetch_timeout: float = 30.0  # seconds
    enabled: bool = False

    def url_for(self, kind: MessageKind) -> Optional[str]:
        """Return the schema URL for a message kind, if there is one."""
        if kind is MessageKind.CREDIT_TRANSFER:
            return self.credit_transfer_url
        if kind is MessageKind.DIRECT_DEBIT:
            return self.direct_debit_url
        return None

    def as_url_map(self) -> Dict[MessageKind, str]:
        """Kind to schema URL table for every kind that has a schema."""
        return {kind: self.url_for(kind) for kind in MessageKind.detection_order()}


@dataclass
class Config:
    """Main configuration class."""

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    service_name: str = "sepa-validator"
    version: str = "1.0.0"

    schema: SchemaConfig = field(default_factory=SchemaConfig)

    @classmethod
    def load_from_file(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationException(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}

            return cls._from_dict(config_data)

        except yaml.YAMLError as e:
            raise ConfigurationException(f"Invalid YAML in configuration file: {e}")
        except ConfigurationException:
            raise
        except Exception as e:
            raise ConfigurationException(f"Error loading configuration file: {e}")

    @classmethod
    def load_from_env(cls, prefix: str = "SEPA_VALIDATOR_") -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        environment = os.getenv(f"{prefix}ENVIRONMENT", config.environment.value)
        try:
            config.environment = Environment(environment)
        except ValueError:
            raise ConfigurationException(
                f"Invalid environment: {environment}",
                config_key=f"{prefix}ENVIRONMENT",
            )

        log_level = os.getenv(f"{prefix}LOG_LEVEL", config.log_level.value)
        try:
            config.log_level = LogLevel(log_level.upper())
        except ValueError:
            raise ConfigurationException(
                f"Invalid log level: {log_level}",
                config_key=f"{prefix}LOG_LEVEL",
            )

        config.schema.credit_transfer_url = os.getenv(
            f"{prefix}CREDIT_TRANSFER_SCHEMA_URL", config.schema.credit_transfer_url
        )
        config.schema.direct_debit_url = os.getenv(
            f"{prefix}DIRECT_DEBIT_SCHEMA_URL", config.schema.direct_debit_url
        )
        timeout = os.getenv(f"{prefix}SCHEMA_FETCH_TIMEOUT")
        if timeout:
            try:
                config.schema.fetch_timeout = float(timeout)
            except ValueError:
                raise ConfigurationException(
                    f"Invalid schema fetch timeout: {timeout}",
                    config_key=f"{prefix}SCHEMA_FETCH_TIMEOUT",
                )
        config.schema.enabled = (
            os.getenv(f"{prefix}SCHEMA_VALIDATION", str(config.schema.enabled)).lower()
            == "true"
        )

        return config

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        config = cls()

        if "environment" in data:
            config.environment = Environment(data["environment"])
        if "log_level" in data:
            config.log_level = LogLevel(str(data["log_level"]).upper())
        if "service_name" in data:
            config.service_name = data["service_name"]

        if "schema" in data:
            try:
                config.schema = SchemaConfig(**data["schema"])
            except TypeError as e:
                raise ConfigurationException(f"Invalid schema section: {e}", config_key="schema")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "log_level": self.log_level.value,
            "service_name": self.service_name,
            "version": self.version,
            "schema": {
                "credit_transfer_url": self.schema.credit_transfer_url,
                "direct_debit_url": self.schema.direct_debit_url,
                "fetch_timeout": self.schema.fetch_timeout,
                "enabled": self.schema.enabled,
            },
        }

    def validate(self) -> None:
        """Validate configuration settings."""
        errors = []

        if self.schema.fetch_timeout <= 0:
            errors.append("Schema fetch timeout must be positive")
        if not self.schema.credit_transfer_url:
            errors.append("Credit transfer schema URL must not be empty")
        if not self.schema.direct_debit_url:
            errors.append("Direct debit schema URL must not be empty")

        if errors:
            raise ConfigurationException(
                f"Configuration validation failed: {'; '.join(errors)}"
            )


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.load_from_env()
        config.validate()
        _config = config
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    config.validate()
    _config = config


def load_config(config_path: Union[str, Path]) -> Config:
    """Load and set configuration from file."""
    config = Config.load_from_file(config_path)
    set_config(config)
    logger.info(f"Configuration loaded from {config_path}")
    return config
