"""Tests for domain exceptions (error_code, message, details)."""

from rbac_admin.domain.enums import ModuleAction, SortDirection
from rbac_admin.domain.exceptions import (
    DuplicateNameException,
    InvalidParentException,
    RbacAdminException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UnknownActionException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base RbacAdminException uses class name as error_code when not provided."""
    exc = RbacAdminException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "RbacAdminException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = RbacAdminException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_is_field_scoped() -> None:
    exc = ValidationException("Invalid", field="name")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.field == "name"
    assert ValidationException("Invalid").details == {}


def test_duplicate_name_targets_name_field() -> None:
    exc = DuplicateNameException("module", "Roles")
    assert isinstance(exc, ValidationException)
    assert exc.field == "name"
    assert "Roles" in exc.message


def test_unknown_action_carries_token() -> None:
    exc = UnknownActionException("can_fly", field="available_actions")
    assert exc.details == {"field": "available_actions", "action": "can_fly"}


def test_invalid_parent_targets_parent_field() -> None:
    assert InvalidParentException("bad parent").field == "parent_id"


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("role", 9)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "role", "resource_id": "9"}


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_module_action_values_and_ordinal() -> None:
    assert ModuleAction.values() == ["can_view", "can_create", "can_edit", "can_delete"]
    assert ModuleAction.ordinal("can_view") < ModuleAction.ordinal("can_delete")
    assert SortDirection.values() == ["asc", "desc"]
