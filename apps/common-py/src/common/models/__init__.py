"""Common models package."""

from common.models.user import UserInput, UserValidationError, ValidationResult, validate_user

__all__ = [
    "UserInput",
    "UserValidationError",
    "ValidationResult",
    "validate_user",
]
