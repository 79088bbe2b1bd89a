"""Profile Repository - user profile documents keyed by email.

All methods use async/await with supabase-py v2.
"""

from datetime import UTC, datetime
from typing import Any

from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.models import UserProfile

from .base import BaseRepository

logger = get_logger(__name__)


class ProfileRepository(BaseRepository):
    """`users` table operations."""

    table = "users"

    async def get_by_email(self, email: str) -> UserProfile | None:
        """Get profile document by email."""
        result = await self.client.table(self.table).select("*").eq("email", email).execute()
        return UserProfile(**result.data[0]) if result.data else None

    async def list_all(self) -> list[UserProfile]:
        """All profile documents."""
        result = await self.client.table(self.table).select("*").execute()
        return [UserProfile(**row) for row in result.data or []]

    async def upsert(self, email: str, data: dict[str, Any]) -> UserProfile:
        """Merge-write fields into the profile document for email.

        Only the given fields change; `updated_at` is stamped on every write.
        """
        payload = {k: v for k, v in data.items() if k != "email"}
        payload["email"] = email
        payload["updated_at"] = datetime.now(UTC).isoformat()

        result = await self.client.table(self.table).upsert(payload, on_conflict="email").execute()
        logger.info(f"Profile saved for {sanitize_string_for_logging(email)}")
        if result.data:
            return UserProfile(**result.data[0])
        return UserProfile(**payload)

    async def delete(self, email: str) -> None:
        """Delete profile document."""
        await self.client.table(self.table).delete().eq("email", email).execute()
        logger.info(f"Profile deleted for {sanitize_string_for_logging(email)}")
