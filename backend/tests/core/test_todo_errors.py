"""Error Hierarchy — verifies codes, categories and the response envelope.

Tests:
    - Each concrete error carries its code, category and severity
    - to_response() has the uniform envelope shape
    - No error exposes an HTTP status (mapping lives in the API layer)
"""

from todo_api.core.errors import (
    DatabaseConnectionError, ErrorCategory, ErrorContext, ErrorSeverity,
    MalformedInputError, PersistenceError, ResourceNotFoundError, TodoApiError,
)


def test_malformed_input_error_fields():
    err = MalformedInputError("bad id", field="id")
    assert err.code == "MALFORMED_INPUT"
    assert err.category == ErrorCategory.MALFORMED_INPUT
    assert err.severity == ErrorSeverity.WARNING
    assert err.field == "id"
    assert str(err) == "bad id"


def test_resource_not_found_message_names_resource():
    err = ResourceNotFoundError("Todo", 7)
    assert err.message == "Todo '7' not found"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.resource_id == 7


def test_persistence_error_records_operation():
    err = PersistenceError("Could not create todo", "create")
    assert err.message == "Database create failed: Could not create todo"
    assert err.operation == "create"
    assert err.context.operation == "create"


def test_persistence_error_keeps_caller_context():
    ctx = ErrorContext(todo_id=3)
    err = PersistenceError("Could not update todo", "update", ctx)
    assert err.context.todo_id == 3
    assert err.context.operation == "update"


def test_connection_error_is_critical():
    err = DatabaseConnectionError("Failed to connect database")
    assert err.category == ErrorCategory.CONNECTIVITY
    assert err.severity == ErrorSeverity.CRITICAL


def test_all_errors_share_base():
    for err in (
        MalformedInputError("x"),
        ResourceNotFoundError("Todo", 1),
        PersistenceError("x", "create"),
        DatabaseConnectionError("x"),
    ):
        assert isinstance(err, TodoApiError)
        assert not hasattr(err, "http_status")


def test_to_response_envelope():
    err = ResourceNotFoundError("Todo", 5, ErrorContext(todo_id=5, operation="get"))
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Todo '5' not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"] == {"todo_id": 5, "operation": "get"}
    assert "T" in body["timestamp"]
