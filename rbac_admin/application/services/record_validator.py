"""Field validation shared by the module and role forms.

Raises field-scoped ValidationException; uniqueness is checked by the
services because it needs a repository.
"""

from rbac_admin.core.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from rbac_admin.domain.exceptions import ValidationException


def validate_name(name: str | None) -> str:
    """Return the trimmed name. Required, at most NAME_MAX_LENGTH characters."""
    value = (name or "").strip()
    if not value:
        raise ValidationException("The name field is required.", field="name")
    if len(value) > NAME_MAX_LENGTH:
        raise ValidationException(
            f"The name field must not be greater than {NAME_MAX_LENGTH} characters.",
            field="name",
        )
    return value


def validate_description(description: str | None) -> str | None:
    """Return the trimmed description or None. At most DESCRIPTION_MAX_LENGTH characters."""
    if description is None:
        return None
    value = description.strip()
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValidationException(
            f"The description field must not be greater than {DESCRIPTION_MAX_LENGTH} characters.",
            field="description",
        )
    return value or None
