"""
Auth & Profile Router

Session creation, account sign-up / sign-in / sign-out and the profile document.
"""
from fastapi import APIRouter, Depends

from storefront.auth import AuthService, RegisterForm, SessionStore, WebSession
from storefront.context import StorefrontContext
from .deps import get_auth_service, get_context, get_session, get_session_store
from .models import LoginRequest, UpdateProfileRequest

router = APIRouter(tags=["auth"])


def _auth_payload(ctx: StorefrontContext) -> dict:
    user = ctx.auth.user
    return {
        "is_authenticated": ctx.auth.is_authenticated,
        "user": user.model_dump() if user else None,
    }


@router.post("/session")
async def create_session(store: SessionStore = Depends(get_session_store)):
    """Start an anonymous session; send the token back as X-Session-Token."""
    session = await store.create()
    return {"session_token": session.token, "expires_at": session.expires_at.isoformat()}


@router.delete("/session")
async def end_session(
    session: WebSession = Depends(get_session),
    store: SessionStore = Depends(get_session_store),
):
    """Drop the session with its cart, wishlist and sign-in."""
    await store.destroy(session.token)
    return {"success": True}


@router.get("/auth/me")
async def get_me(ctx: StorefrontContext = Depends(get_context)):
    return _auth_payload(ctx)


@router.post("/auth/register")
async def register(
    form: RegisterForm,
    ctx: StorefrontContext = Depends(get_context),
    auth: AuthService = Depends(get_auth_service),
):
    await auth.register(ctx.auth, form)
    return _auth_payload(ctx)


@router.post("/auth/login")
async def login(
    request: LoginRequest,
    ctx: StorefrontContext = Depends(get_context),
    auth: AuthService = Depends(get_auth_service),
):
    await auth.sign_in(ctx.auth, request.email, request.password)
    return {**_auth_payload(ctx), "message": "Logged in successfully!"}


@router.post("/auth/logout")
async def logout(
    ctx: StorefrontContext = Depends(get_context),
    auth: AuthService = Depends(get_auth_service),
):
    await auth.sign_out(ctx.auth)
    return _auth_payload(ctx)


@router.get("/profile")
async def get_profile(
    ctx: StorefrontContext = Depends(get_context),
    auth: AuthService = Depends(get_auth_service),
):
    profile = await auth.get_profile(ctx.auth)
    return profile.model_dump(mode="json")


@router.put("/profile")
async def update_profile(
    request: UpdateProfileRequest,
    ctx: StorefrontContext = Depends(get_context),
    auth: AuthService = Depends(get_auth_service),
):
    profile = await auth.update_profile(ctx.auth, request.display_name, request.photo)
    return {**profile.model_dump(mode="json"), "message": "Profile updated successfully!"}
