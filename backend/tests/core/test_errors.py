"""Error Hierarchy: codes, statuses and the REST envelope.

Tests:
    - Each error maps to its code and HTTP status
    - to_response() exposes context but never debug_info
    - ValidationFailedError adds the field -> message map
"""

from app.core.errors import (
    DatabaseError, ErrorCategory, InvalidParameterError, InvalidSortFieldError,
    LedgerError, ResourceNotFoundError, ValidationFailedError,
)


def test_not_found_message_and_context():
    err = ResourceNotFoundError("Buyer", 42)
    assert err.message == "Buyer not found"
    assert err.http_status == 404
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["context"]["resource_type"] == "Buyer"
    assert body["context"]["resource_id"] == "42"


def test_invalid_parameter_is_400_validation():
    err = InvalidParameterError("page", "abc", "must be an integer")
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.to_response()["error"]["context"]["parameter"] == "page"


def test_invalid_sort_lists_allowed_fields():
    err = InvalidSortFieldError("bogusField", {"revenue", "id", "name"})
    assert err.allowed == ["id", "name", "revenue"]
    assert "bogusField" in err.message
    assert err.to_response()["error"]["code"] == "INVALID_SORT_FIELD"


def test_validation_failed_carries_fields():
    err = ValidationFailedError({"dueDate": "Due date must be after the issue date"})
    body = err.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["fields"] == {"dueDate": "Due date must be after the issue date"}


def test_database_error_is_503():
    err = DatabaseError("Connection refused", "execute")
    assert err.http_status == 503
    assert err.code == "DATABASE_ERROR"


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("Person"),
        InvalidParameterError("limit", 0, "must be at least 1"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, LedgerError)
        assert "debug_info" not in err.to_response()["error"]["context"]
