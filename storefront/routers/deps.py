"""
Shared Dependencies for Routers

Lazy-loaded singletons plus session resolution.
"""

from typing import Optional, Union

from fastapi import Depends, Header, HTTPException

from storefront.auth import AuthService, SessionStore, WebSession
from storefront.context import StorefrontContext
from storefront.errors import ERROR_SESSION_EXPIRED
from storefront.services.catalog import CatalogClient
from storefront.services.domains import AdminService
from storefront.services.repositories import ProductRepository, ProfileRepository

SESSION_HEADER = "X-Session-Token"

# ==================== LAZY SINGLETONS ====================

_session_store: Optional[SessionStore] = None
_catalog_client: Optional[CatalogClient] = None


def get_session_store() -> SessionStore:
    """Get or create the in-memory SessionStore singleton"""
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store


def get_catalog_client() -> CatalogClient:
    """Get or create CatalogClient singleton (lazy loaded)"""
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient()
    return _catalog_client


def get_auth_service() -> AuthService:
    """Each sign-in gets its own Supabase client; see AuthService."""
    from storefront.db import create_session_client
    return AuthService(create_session_client)


async def get_admin_service() -> AdminService:
    from storefront.db import get_supabase
    client = await get_supabase()
    return AdminService(ProductRepository(client), ProfileRepository(client))


# ==================== SESSION ====================

def get_session(
    x_session_token: Optional[str] = Header(None),
    store: SessionStore = Depends(get_session_store),
) -> WebSession:
    """Resolve the X-Session-Token header to a live session (401 otherwise)."""
    session = store.get(x_session_token)
    if session is None:
        raise HTTPException(status_code=401, detail=ERROR_SESSION_EXPIRED)
    return session


def get_context(session: WebSession = Depends(get_session)) -> StorefrontContext:
    return session.context


def parse_product_id(raw: Union[str, int]) -> Union[str, int]:
    """Catalog ids are integers; document-store ids stay strings."""
    if isinstance(raw, int):
        return raw
    # str.isdigit() also accepts "²" and other digits int() rejects
    return int(raw) if raw.isascii() and raw.isdigit() else raw


async def close_catalog_client() -> None:
    global _catalog_client
    if _catalog_client is not None:
        await _catalog_client.aclose()
        _catalog_client = None
