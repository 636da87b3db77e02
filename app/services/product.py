from app.errors import DomainValidationError, GenericError, NotFoundError


def get_product(product_id: str) -> str:
    """
    Look up a product description by its identifier.

    Matching is exact and case-sensitive; any identifier that is not one of
    the reserved failure triggers is echoed back verbatim.

    Raises:
        NotFoundError: If product_id is "notfound"
        GenericError: If product_id is "generic"
        DomainValidationError: If product_id is "invalid"
    """
    if product_id == "notfound":
        raise NotFoundError(f"Product with ID {product_id} not found.")
    if product_id == "generic":
        raise GenericError("A generic error occurred.")
    if product_id == "invalid":
        raise DomainValidationError(f"Invalid product ID: {product_id}")
    return f"Product with ID {product_id}"
