"""
Wishlist Router

Add is idempotent: saving a product twice reports it as already saved.
"""
from fastapi import APIRouter, Depends

from storefront.context import StorefrontContext
from storefront.services.catalog import CatalogClient
from .deps import get_catalog_client, get_context, parse_product_id
from .models import AddItemRequest
from .products import find_product

router = APIRouter(tags=["wishlist"])


@router.get("/wishlist")
async def get_wishlist(ctx: StorefrontContext = Depends(get_context)):
    return ctx.wishlist.snapshot().to_dict()


@router.post("/wishlist/items")
async def add_to_wishlist(
    request: AddItemRequest,
    ctx: StorefrontContext = Depends(get_context),
    client: CatalogClient = Depends(get_catalog_client),
):
    product = await find_product(ctx, client, parse_product_id(request.product_id))
    added = ctx.wishlist.add_to_wishlist(product)
    return {
        **ctx.wishlist.snapshot().to_dict(),
        "added": added,
        "message": "Item added to wishlist!" if added else "Already in wishlist",
    }


@router.delete("/wishlist/items/{product_id}")
async def remove_from_wishlist(product_id: str, ctx: StorefrontContext = Depends(get_context)):
    ctx.wishlist.remove_from_wishlist(parse_product_id(product_id))
    return {**ctx.wishlist.snapshot().to_dict(), "message": "Item removed from wishlist"}


@router.delete("/wishlist")
async def clear_wishlist(ctx: StorefrontContext = Depends(get_context)):
    ctx.wishlist.clear_wishlist()
    return {**ctx.wishlist.snapshot().to_dict(), "message": "Wishlist cleared"}
