"""User payload validation model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator


class UserInput(BaseModel):
    """User payload accepted by the validation endpoint.

    Fields are declared in the order they are checked.
    """

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "age": 30,
            }
        },
    )

    name: str = Field(..., min_length=3, description="Full name of the user")
    email: EmailStr = Field(..., description="Email address of the user")
    age: int | None = Field(None, ge=0, le=120, strict=True, description="Age in years")

    @field_validator("email", mode="before")
    @classmethod
    def _bare_address_only(cls, value: Any) -> Any:
        # EmailStr would otherwise accept and strip "Name <addr>" forms
        if isinstance(value, str) and ("<" in value or ">" in value):
            raise ValueError("value is not a valid email address: display names are not allowed")
        return value

    @field_validator("age", mode="before")
    @classmethod
    def _age_not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must be an integer when present")
        return value


class UserValidationError(ValueError):
    """Raised when a user payload violates the UserInput schema."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationResult(BaseModel):
    """Successful validation outcome."""

    valid: bool = True
    user: dict[str, Any]


def first_violation(exc: ValidationError) -> UserValidationError:
    """Convert a pydantic ValidationError into its first violation.

    Errors for declared fields come first, in declaration order, followed
    by errors for unexpected keys.
    """
    order = {name: index for index, name in enumerate(UserInput.model_fields)}
    errors = sorted(
        exc.errors(include_url=False),
        key=lambda err: order.get(str(err["loc"][0]) if err["loc"] else "", len(order)),
    )
    error = errors[0]
    field = ".".join(str(part) for part in error["loc"]) or None
    message = f"{field}: {error['msg']}" if field else error["msg"]
    return UserValidationError(message, field=field)


def validate_user(payload: dict[str, Any]) -> ValidationResult:
    """Validate a user payload.

    Args:
        payload: Decoded JSON object

    Returns:
        ValidationResult holding the normalized user, without missing optional fields

    Raises:
        UserValidationError: With the first violation found
    """
    try:
        user = UserInput.model_validate(payload)
    except ValidationError as e:
        raise first_violation(e) from e
    return ValidationResult(user=user.model_dump(exclude_unset=True))
