"""Configuration-related exceptions for the study knowledge engine."""

from .base import StudyRagError


class ConfigurationError(StudyRagError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "SR_CFG_001"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "SR_CFG_002"
