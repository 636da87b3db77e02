import pytest

from app.api.exception_handlers import ERROR_STATUS_CODES, translate_error
from app.errors import (
    DomainError,
    DomainValidationError,
    GenericError,
    NotFoundError,
)
from app.services.product import get_product


# ============================================================================
# SERVICE TESTS
# ============================================================================


@pytest.mark.parametrize(
    "product_id,error_cls,message",
    [
        ("notfound", NotFoundError, "Product with ID notfound not found."),
        ("invalid", DomainValidationError, "Invalid product ID: invalid"),
        ("generic", GenericError, "A generic error occurred."),
    ],
)
def test_get_product_raises_domain_errors(product_id, error_cls, message):
    """Test that each trigger raises its error kind with the expected message."""
    with pytest.raises(error_cls) as exc_info:
        get_product(product_id)

    assert str(exc_info.value) == message


def test_get_product_returns_description():
    assert get_product("10") == "Product with ID 10"
    assert get_product("") == "Product with ID "


# ============================================================================
# TRANSLATOR TESTS
# ============================================================================


@pytest.mark.parametrize(
    "exc,expected",
    [
        (NotFoundError("missing"), (404, "missing")),
        (DomainValidationError("bad id"), (400, "bad id")),
        (GenericError("boom"), (500, "boom")),
    ],
)
def test_translate_error_maps_each_kind(exc, expected):
    """Test that every error kind maps to its status with the message unchanged."""
    assert translate_error(exc) == expected


def test_translate_error_covers_every_kind():
    """Test that the mapping is closed over exactly the three error kinds."""
    assert set(ERROR_STATUS_CODES) == {NotFoundError, DomainValidationError, GenericError}


def test_translate_error_uses_parent_kind_for_subclasses():
    class MissingVariantError(NotFoundError):
        pass

    assert translate_error(MissingVariantError("gone")) == (404, "gone")


def test_translate_error_unmapped_domain_error_is_server_error():
    assert translate_error(DomainError("unexpected")) == (500, "unexpected")
