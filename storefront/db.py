"""
Database Module - Supabase clients

- get_supabase(): shared service client for the `users` / `products`
  tables used by the admin panel. It never signs in as a user.
- create_session_client(): a fresh client per web session. Supabase auth
  keeps the signed-in session on the client object, so every sign-in gets
  its own and profile writes run under that user's token.

Cart and wishlist never go through here.
"""

from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client

from storefront import config
from storefront.logging import get_logger

logger = get_logger(__name__)

_supabase_client: Optional[AsyncClient] = None


def _require_credentials() -> None:
    if not config.SUPABASE_URL or not config.SUPABASE_KEY:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set")


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase service client (singleton).

    Raises:
        ValueError: If SUPABASE_URL / SUPABASE_KEY are not set
    """
    global _supabase_client

    if _supabase_client is None:
        _require_credentials()
        logger.info("Initializing async Supabase client...")
        _supabase_client = await acreate_client(config.SUPABASE_URL, config.SUPABASE_KEY)

    return _supabase_client


async def create_session_client() -> AsyncClient:
    """
    New Supabase client owned by one web session's sign-in.

    Raises:
        ValueError: If SUPABASE_URL / SUPABASE_KEY are not set
    """
    _require_credentials()
    return await acreate_client(config.SUPABASE_URL, config.SUPABASE_KEY)


async def close_session_client(client: Optional[AsyncClient]) -> None:
    """Sign a session's client out when the session goes away; None is a no-op."""
    if client is None:
        return
    try:
        await client.auth.sign_out()
    except Exception as e:
        logger.warning(f"Error closing session auth client: {e}")


async def close_supabase() -> None:
    """Drop the shared client at shutdown."""
    global _supabase_client
    if _supabase_client is not None:
        _supabase_client = None
        logger.info("Supabase client closed")
