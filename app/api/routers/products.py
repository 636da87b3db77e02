from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.services.product import get_product

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/{product_id}", response_class=PlainTextResponse)
def get_product_by_id(product_id: str):
    """
    Get a product by ID.
    - "notfound", "invalid" and "generic" raise domain errors, which the
      global exception handlers turn into 404, 400 and 500 responses
    - Any other ID returns its description as plain text
    """
    return get_product(product_id)
