"""Validation errors raised when adding menu entries."""

from __future__ import annotations

from enum import Enum

from chef_menu.constant import VALIDATION_MESSAGES


class ValidationReason(str, Enum):
    """Which add-form field failed validation."""

    MISSING_NAME = "missing_name"
    MISSING_PRICE = "missing_price"
    INVALID_PRICE = "invalid_price"
    INVALID_COURSE = "invalid_course"


class MenuValidationError(ValueError):
    """Raised by MenuStore.add before any mutation happens."""

    def __init__(self, reason: ValidationReason) -> None:
        self.reason = reason
        self.message = VALIDATION_MESSAGES[reason.value]
        super().__init__(self.message)
