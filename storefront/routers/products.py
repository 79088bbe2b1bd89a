"""
Products Router

Catalog listing with price-bracket filter and sort, product detail, categories.
"""
from fastapi import APIRouter, Depends, Query

from storefront.context import StorefrontContext
from storefront.services.catalog import (
    CatalogClient,
    load_categories,
    load_product_detail,
    load_products,
)
from storefront.services.listing import PriceRange, SortKey, apply_listing
from storefront.services.models import Product, ProductId
from .deps import get_catalog_client, get_context, parse_product_id

router = APIRouter(tags=["products"])


async def find_product(
    ctx: StorefrontContext, client: CatalogClient, product_id: ProductId
) -> Product:
    """Product snapshot from the session's loaded catalog, fetched if not loaded."""
    selected = ctx.catalog.selected_product
    if selected is not None and selected.id == product_id:
        return selected
    for product in ctx.catalog.products:
        if product.id == product_id:
            return product
    return await client.get_product(product_id)


@router.get("/products")
async def list_products(
    category: str | None = None,
    price_range: PriceRange = Query(PriceRange.ALL),
    sort: SortKey = Query(SortKey.FEATURED),
    ctx: StorefrontContext = Depends(get_context),
    client: CatalogClient = Depends(get_catalog_client),
):
    """Products for a category (or all), filtered and sorted."""
    products = await load_products(client, ctx.catalog, category)
    listed = apply_listing(products, price_range, sort)
    return {
        "products": [p.to_dict() for p in listed],
        "count": len(listed),
        "category": category or "all",
        "price_range": price_range.value,
        "sort": sort.value,
    }


@router.get("/products/categories")
async def list_categories(
    ctx: StorefrontContext = Depends(get_context),
    client: CatalogClient = Depends(get_catalog_client),
):
    return {"categories": await load_categories(client, ctx.catalog)}


@router.get("/products/{product_id}")
async def get_product(
    product_id: str,
    ctx: StorefrontContext = Depends(get_context),
    client: CatalogClient = Depends(get_catalog_client),
):
    product = await load_product_detail(client, ctx.catalog, parse_product_id(product_id))
    return product.to_dict()
