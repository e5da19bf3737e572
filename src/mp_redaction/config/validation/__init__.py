"""Config validation errors."""
from mp_redaction.config.validation.errors import (
    ConfigError,
    ConfigFileError,
    InvalidSettingValueError,
)

__all__ = ["ConfigError", "ConfigFileError", "InvalidSettingValueError"]
