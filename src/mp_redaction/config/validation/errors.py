"""Config validation errors."""
from __future__ import annotations

from mp_redaction.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when redaction configuration is invalid or could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but has the wrong type or an unknown value.

    The offending value is kept on ``.value`` for callers that need it but is
    left out of the message and ``detail``; only its type is reported.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' is invalid: {reason}",
            detail={
                "setting": setting_name,
                "reason": reason,
                "value_type": type(value).__name__,
            },
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ConfigFileError(ConfigError):
    """A configuration file could not be read or parsed."""
    default_code = "config_file_error"

    def __init__(self, path: str, reason: str, *, cause: BaseException | None = None) -> None:
        super().__init__(
            f"Could not read config file '{path}': {reason}",
            detail={"path": path, "reason": reason},
            cause=cause,
        )
        self.path = path
        self.reason = reason


__all__ = ["ConfigError", "ConfigFileError", "InvalidSettingValueError"]
