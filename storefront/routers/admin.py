"""
Admin Router

Product and user management for the admin account.
"""
from fastapi import APIRouter, Depends

from storefront.context import StorefrontContext
from storefront.services.domains import AdminService, ProductForm, UserForm
from .deps import get_admin_service, get_context

router = APIRouter(tags=["admin"])


# ==================== PRODUCTS ====================

@router.get("/products")
async def admin_get_products(
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    """Products grouped by category"""
    groups = await admin.list_products_by_category(ctx.auth)
    return {
        "categories": [
            {"category": name, "products": [p.to_dict() for p in products]}
            for name, products in groups.items()
        ]
    }


@router.post("/products")
async def admin_create_product(
    form: ProductForm,
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    product = await admin.save_product(ctx.auth, form)
    return {"success": True, "product": product.to_dict(), "message": "Product added successfully!"}


@router.put("/products/{product_id}")
async def admin_update_product(
    product_id: str,
    form: ProductForm,
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    product = await admin.save_product(ctx.auth, form, product_id)
    return {"success": True, "product": product.to_dict(), "message": "Product updated successfully!"}


@router.delete("/products/{product_id}")
async def admin_delete_product(
    product_id: str,
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    await admin.delete_product(ctx.auth, product_id)
    return {"success": True, "message": "Product deleted successfully!"}


# ==================== USERS ====================

@router.get("/users")
async def admin_get_users(
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    users = await admin.list_users(ctx.auth)
    return {"users": [u.model_dump(mode="json") for u in users]}


@router.put("/users")
async def admin_save_user(
    form: UserForm,
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    profile = await admin.save_user(ctx.auth, form)
    return {"success": True, "user": profile.model_dump(mode="json"), "message": "User saved successfully!"}


@router.delete("/users/{email}")
async def admin_delete_user(
    email: str,
    ctx: StorefrontContext = Depends(get_context),
    admin: AdminService = Depends(get_admin_service),
):
    await admin.delete_user(ctx.auth, email)
    return {"success": True, "message": "User deleted successfully!"}
