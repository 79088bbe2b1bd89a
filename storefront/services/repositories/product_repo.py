"""Product Repository - admin-managed product documents."""
from typing import Optional, List, Dict, Any

from pydantic import ValidationError

from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Product
from .base import BaseRepository

logger = get_logger(__name__)


def _to_row(data: Dict[str, Any]) -> Dict[str, Any]:
    """Decimal price is not JSON serializable; store it as a number."""
    row = dict(data)
    if "price" in row and row["price"] is not None:
        row["price"] = float(row["price"])
    return row


class ProductRepository(BaseRepository):
    """`products` table operations."""

    table = "products"

    async def list_all(self) -> List[Product]:
        """Get all product documents; malformed rows are skipped."""
        result = await self.client.table(self.table).select("*").execute()

        products = []
        for row in result.data or []:
            try:
                products.append(Product(**row))
            except ValidationError:
                logger.warning(f"Skipping malformed product row {sanitize_id_for_logging(row.get('id'))}")
        return products

    async def create(self, data: Dict[str, Any]) -> Product:
        """Create new product."""
        result = await self.client.table(self.table).insert(_to_row(data)).execute()
        return Product(**result.data[0])

    async def update(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        """Update product."""
        result = await self.client.table(self.table).update(_to_row(data)).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def delete(self, product_id: str) -> None:
        await self.client.table(self.table).delete().eq("id", product_id).execute()
