"""Admin Domain Service.

Product and user document CRUD for the admin panel. Every operation
first checks that the session belongs to the configured admin account.
"""

from typing import Optional, Union

from pydantic import BaseModel

from storefront import config
from storefront.context import AuthState
from storefront.errors import (
    ERROR_IMAGE_TOO_LARGE,
    ERROR_NOT_ADMIN,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_REQUIRED_FIELDS,
    ERROR_UNAUTHORIZED,
    AuthError,
    FormValidationError,
    PermissionDeniedError,
    ProductNotFoundError,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.images import image_too_large
from storefront.services.listing import UNCATEGORIZED, group_by_category
from storefront.services.models import AuthUser, Product, UserProfile
from storefront.services.money import parse_price
from storefront.services.repositories import ProductRepository, ProfileRepository

logger = get_logger(__name__)


class ProductForm(BaseModel):
    title: str = ""
    price: Union[str, float, int] = ""
    image: str = ""
    description: str = ""
    category: str = ""


class UserForm(BaseModel):
    email: str = ""
    display_name: str = ""
    photo: str = ""


class AdminService:
    """Admin panel operations."""

    def __init__(
        self,
        products: ProductRepository,
        profiles: ProfileRepository,
        admin_email: Optional[str] = None,
    ) -> None:
        self.products = products
        self.profiles = profiles
        self.admin_email = (admin_email or config.ADMIN_EMAIL).lower()

    def is_admin(self, user: Optional[AuthUser]) -> bool:
        return user is not None and user.email.lower() == self.admin_email

    def require_admin(self, state: AuthState) -> AuthUser:
        """
        Raises:
            AuthError: Not signed in
            PermissionDeniedError: Signed in, but not the admin account
        """
        if not state.is_authenticated or state.user is None:
            raise AuthError(ERROR_UNAUTHORIZED)
        if not self.is_admin(state.user):
            raise PermissionDeniedError(ERROR_NOT_ADMIN)
        return state.user

    # ==================== PRODUCTS ====================

    async def list_products_by_category(self, state: AuthState) -> dict[str, list[Product]]:
        self.require_admin(state)
        return group_by_category(await self.products.list_all())

    async def save_product(
        self, state: AuthState, form: ProductForm, product_id: Optional[str] = None
    ) -> Product:
        """
        Create a product, or update product_id when given.

        Raises:
            FormValidationError: Missing title, missing or invalid price, image over 5MB
            ProductNotFoundError: product_id does not exist
        """
        self.require_admin(state)

        errors: dict[str, str] = {}
        if not form.title.strip():
            errors["title"] = "Title is required"
        try:
            price = parse_price(form.price)
        except ValueError as e:
            errors["price"] = str(e)
        if image_too_large(form.image):
            errors["image"] = ERROR_IMAGE_TOO_LARGE
        if errors:
            message = ERROR_REQUIRED_FIELDS if errors.keys() - {"image"} else ERROR_IMAGE_TOO_LARGE
            raise FormValidationError(errors, message)

        data = {
            "title": form.title.strip(),
            "price": price,
            "image": form.image,
            "description": form.description,
            "category": form.category.strip() or UNCATEGORIZED,
        }

        if product_id is None:
            product = await self.products.create(data)
            logger.info(f"Product added: {sanitize_id_for_logging(product.id)}")
            return product

        product = await self.products.update(product_id, data)
        if product is None:
            raise ProductNotFoundError(ERROR_PRODUCT_NOT_FOUND)
        logger.info(f"Product updated: {sanitize_id_for_logging(product_id)}")
        return product

    async def delete_product(self, state: AuthState, product_id: str) -> None:
        self.require_admin(state)
        await self.products.delete(product_id)
        logger.info(f"Product deleted: {sanitize_id_for_logging(product_id)}")

    # ==================== USERS ====================

    async def list_users(self, state: AuthState) -> list[UserProfile]:
        self.require_admin(state)
        return await self.profiles.list_all()

    async def save_user(self, state: AuthState, form: UserForm) -> UserProfile:
        """Create or update the profile document keyed by form.email."""
        self.require_admin(state)
        if not form.email.strip():
            raise FormValidationError({"email": "Email is required"}, ERROR_REQUIRED_FIELDS)
        return await self.profiles.upsert(
            form.email.strip(),
            {"display_name": form.display_name, "photo": form.photo or ""},
        )

    async def delete_user(self, state: AuthState, email: str) -> None:
        self.require_admin(state)
        await self.profiles.delete(email)
