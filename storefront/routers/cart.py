"""
Cart Router

Reads and mutates the session's cart. Quantities below 1 are rejected
here, before the store is touched.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.context import StorefrontContext
from storefront.errors import ERROR_INVALID_QUANTITY
from storefront.logging import get_logger
from storefront.services.catalog import CatalogClient
from .deps import get_catalog_client, get_context, parse_product_id
from .models import AddItemRequest, UpdateQuantityRequest
from .products import find_product

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


@router.get("/cart")
async def get_cart(ctx: StorefrontContext = Depends(get_context)):
    return ctx.cart.snapshot().to_dict()


@router.post("/cart/items")
async def add_to_cart(
    request: AddItemRequest,
    ctx: StorefrontContext = Depends(get_context),
    client: CatalogClient = Depends(get_catalog_client),
):
    """Add one unit of a product (quantity + 1 if already in cart)."""
    product = await find_product(ctx, client, parse_product_id(request.product_id))
    state = ctx.cart.add_item(product)
    return {**state.to_dict(), "message": "Item added to cart!"}


@router.patch("/cart/items/{product_id}")
async def update_quantity(
    product_id: str,
    request: UpdateQuantityRequest,
    ctx: StorefrontContext = Depends(get_context),
):
    if request.quantity < 1:
        raise HTTPException(status_code=400, detail=ERROR_INVALID_QUANTITY)
    return ctx.cart.set_quantity(parse_product_id(product_id), request.quantity).to_dict()


@router.delete("/cart/items/{product_id}")
async def remove_from_cart(product_id: str, ctx: StorefrontContext = Depends(get_context)):
    state = ctx.cart.remove_item(parse_product_id(product_id))
    return {**state.to_dict(), "message": "Item removed from cart"}
