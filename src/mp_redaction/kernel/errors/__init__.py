"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError        (application.py)
        └── ConfigError         (mp_redaction.config.validation)
            ├── InvalidSettingValueError
            └── ConfigFileError

The redaction engine itself never raises: malformed input degrades to
"unchanged" or "fully masked". Only configuration parsing raises.
"""

from mp_redaction.kernel.errors.application import ApplicationError
from mp_redaction.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
