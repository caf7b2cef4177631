"""Error hierarchy: status codes and response bodies."""

from products_api.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, ProductApiError,
    ProductNotFoundError, RequestValidationFailed,
)


def test_validation_failure_body_is_errors_array():
    entries = [{"type": "field", "msg": "x", "path": "name", "location": "body"}]
    err = RequestValidationFailed(entries)

    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.to_response() == {"errors": entries}


def test_not_found_body_is_fixed_message():
    err = ProductNotFoundError(7)

    assert err.http_status == 404
    assert err.product_id == 7
    assert err.to_response() == {"error": "No existe el producto"}


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")

    assert isinstance(err, ProductApiError)
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "execute"
    assert err.to_response()["error"].startswith("Database execute failed")
