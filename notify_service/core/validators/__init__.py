"""Validators for notification configuration documents.

Usage:
    from notify_service.core.validators import validate

    with open("conf/notifications.yaml", "rb") as stream:
        result = validate(stream)

    if not result:
        print(result.error)
"""

from __future__ import annotations

from notify_service.core.validators.config import (
    ValidationResult,
    Validator,
    decode,
    iter_violations,
    load_configuration,
    load_configuration_file,
    validate,
)

__all__ = [
    "ValidationResult",
    "Validator",
    "decode",
    "iter_violations",
    "load_configuration",
    "load_configuration_file",
    "validate",
]
