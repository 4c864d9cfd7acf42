"""Error Hierarchy — status codes, codes and response envelope."""

from app.core.errors import (
    AuthenticationError, AuthorizationError, BloglistError, DatabaseError,
    ErrorContext, InvalidIdentifierError, ResourceNotFoundError, ValidationError,
)


def test_all_errors_share_base():
    for exc in (
        ValidationError("x"), InvalidIdentifierError("x"), AuthenticationError(),
        AuthorizationError("x"), ResourceNotFoundError("blog", "1"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(exc, BloglistError)


def test_status_codes():
    assert ValidationError("x").http_status == 400
    assert InvalidIdentifierError("x").http_status == 400
    assert AuthenticationError().http_status == 401
    assert AuthorizationError("x").http_status == 401
    assert AuthorizationError("x", http_status=403).http_status == 403
    assert ResourceNotFoundError("blog", "1").http_status == 404
    assert DatabaseError("x", "query").http_status == 503


def test_response_has_error_message_field():
    body = ValidationError("username must be unique", field="username").to_response()
    assert body["error"] == "username must be unique"
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["severity"] == "error"


def test_authentication_error_does_not_name_the_factor():
    message = AuthenticationError().message
    assert message == "invalid username or password"


def test_context_defaults_are_empty():
    ctx = ErrorContext()
    assert ctx.user_id is None and ctx.entity_id is None
    assert ctx.timestamp is not None
