"""
Catalog Service Client

Async client for the public catalog REST API:
- GET /products
- GET /products/{id}
- GET /products/category/{name}
- GET /products/categories

Records are validated into Product here, once; callers never see raw JSON.
There are no retries: a failed fetch raises and the caller shows an error.
"""

from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from storefront import config
from storefront.context import CatalogState
from storefront.errors import (
    ERROR_CATALOG_UNAVAILABLE,
    ERROR_PRODUCT_NOT_FOUND,
    CatalogUnavailableError,
    ProductNotFoundError,
)
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.services.models import Product, ProductId

logger = get_logger(__name__)


class CatalogClient:
    """Catalog API client."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = (base_url or config.CATALOG_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.CATALOG_TIMEOUT
        # Lazily created unless injected (tests pass a MockTransport client)
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Shared httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=5.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _get_json(self, path: str) -> Any:
        client = await self._get_http_client()
        url = f"{self.base_url}{path}"
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise ProductNotFoundError(ERROR_PRODUCT_NOT_FOUND)
            logger.error("Catalog API error %s for %s", e.response.status_code, path)
            raise CatalogUnavailableError(f"{ERROR_CATALOG_UNAVAILABLE}: HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.error("Catalog network error for %s: %s", path, type(e).__name__)
            raise CatalogUnavailableError(f"{ERROR_CATALOG_UNAVAILABLE}: {e}")

        # The catalog answers an unknown id with 200 and an empty body
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            logger.error("Catalog returned non-JSON body for %s", path)
            raise CatalogUnavailableError(f"{ERROR_CATALOG_UNAVAILABLE}: invalid response")

    @staticmethod
    def _parse_products(data: Any) -> list[Product]:
        if not isinstance(data, list):
            raise CatalogUnavailableError(f"{ERROR_CATALOG_UNAVAILABLE}: expected a list")

        products = []
        for raw in data:
            try:
                products.append(Product.model_validate(raw))
            except ValidationError as e:
                raw_id = raw.get("id") if isinstance(raw, dict) else None
                logger.warning(
                    f"Skipping malformed catalog record {sanitize_id_for_logging(raw_id)}: "
                    f"{e.error_count()} error(s)"
                )
        return products

    async def list_products(self, category: Optional[str] = None) -> list[Product]:
        """
        Fetch the product list, optionally for one category.

        Args:
            category: Category name; None or "all" fetches everything

        Returns:
            Products in the catalog's order
        """
        if category and category.lower() != "all":
            path = f"/products/category/{quote(category, safe='')}"
        else:
            path = "/products"
        data = await self._get_json(path)
        products = self._parse_products(data or [])
        logger.info(
            f"Fetched {len(products)} products (category={sanitize_string_for_logging(category)})"
        )
        return products

    async def get_product(self, product_id: ProductId) -> Product:
        """
        Fetch one product.

        Raises:
            ProductNotFoundError: Unknown id
            CatalogUnavailableError: Transport/status failure or malformed record
        """
        data = await self._get_json(f"/products/{quote(str(product_id), safe='')}")
        if not data:
            raise ProductNotFoundError(ERROR_PRODUCT_NOT_FOUND)
        try:
            return Product.model_validate(data)
        except ValidationError:
            logger.error(f"Malformed catalog record {sanitize_id_for_logging(product_id)}")
            raise CatalogUnavailableError(f"{ERROR_CATALOG_UNAVAILABLE}: malformed product record")

    async def list_categories(self) -> list[str]:
        """Fetch category names."""
        data = await self._get_json("/products/categories")
        if not isinstance(data, list):
            raise CatalogUnavailableError(f"{ERROR_CATALOG_UNAVAILABLE}: expected a list")
        return [str(c) for c in data]


async def load_products(
    client: CatalogClient, state: CatalogState, category: Optional[str] = None
) -> list[Product]:
    """
    Fetch products into a CatalogState.

    On failure the message is stored in state.error (the view's error
    display) and the exception is re-raised; no retry is attempted.
    """
    state.set_loading(True)
    try:
        products = await client.list_products(category)
    except (CatalogUnavailableError, ProductNotFoundError) as e:
        logger.warning(f"Product list load failed: {e}")
        state.set_error(str(e))
        raise
    state.set_products(products)
    return products


async def load_product_detail(
    client: CatalogClient, state: CatalogState, product_id: ProductId
) -> Product:
    """Fetch one product into state.selected_product; errors go to state.error."""
    state.set_loading(True)
    try:
        product = await client.get_product(product_id)
    except (CatalogUnavailableError, ProductNotFoundError) as e:
        logger.warning(f"Product detail load failed: {e}")
        state.set_selected_product(None)
        state.set_error(str(e))
        raise
    state.set_selected_product(product)
    state.set_error(None)
    return product


async def load_categories(client: CatalogClient, state: CatalogState) -> list[str]:
    """Fetch category names into state.categories; errors go to state.error."""
    state.set_loading(True)
    try:
        categories = await client.list_categories()
    except (CatalogUnavailableError, ProductNotFoundError) as e:
        logger.warning(f"Category load failed: {e}")
        state.set_error(str(e))
        raise
    state.set_categories(categories)
    return categories
