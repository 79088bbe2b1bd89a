"""Checkout Router"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.context import StorefrontContext
from storefront.errors import ERROR_UNAUTHORIZED
from storefront.services.domains import ShippingForm, place_order
from storefront.services.money import to_float
from .deps import get_context

router = APIRouter(tags=["checkout"])


@router.post("/checkout")
async def checkout(form: ShippingForm, ctx: StorefrontContext = Depends(get_context)):
    result = place_order(ctx, form)
    if not result.success:
        status = 401 if result.reason == ERROR_UNAUTHORIZED else 400
        return JSONResponse(
            status_code=status,
            content={"detail": result.reason, "errors": result.errors},
        )
    return {
        "success": True,
        "message": result.message,
        "total": to_float(result.total),
        "item_count": result.item_count,
        "shipping": result.shipping.model_dump() if result.shipping else None,
    }
