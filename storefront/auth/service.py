"""
Auth Service

Account sign-up / sign-in / sign-out against Supabase auth, plus the
user's profile document. Results are written into the session's AuthState.

Every sign-in runs on a Supabase client of its own, kept in
AuthState.client. Sign-out and profile calls go through that client, so
one session can never act on (or end) another session's sign-in.
"""

from typing import Awaitable, Callable, Optional

from pydantic import BaseModel
from supabase._async.client import AsyncClient

from storefront.context import AuthState
from storefront.db import close_session_client
from storefront.errors import (
    ERROR_EMAILS_MISMATCH,
    ERROR_PASSWORDS_MISMATCH,
    ERROR_PHOTO_TOO_LARGE,
    ERROR_REQUIRED_FIELDS,
    ERROR_UNAUTHORIZED,
    AuthError,
    FormValidationError,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.images import image_too_large
from storefront.services.models import AuthUser, UserProfile
from storefront.services.repositories import ProfileRepository

logger = get_logger(__name__)

ClientFactory = Callable[[], Awaitable[AsyncClient]]


class RegisterForm(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    confirm_email: str = ""
    password: str = ""
    confirm_password: str = ""
    gender: Optional[str] = None
    dob: Optional[str] = None


def validate_registration(form: RegisterForm) -> dict[str, str]:
    """Field -> message for every problem in the sign-up form."""
    errors: dict[str, str] = {}
    for name, label in (
        ("first_name", "First name"),
        ("last_name", "Last name"),
        ("email", "Email"),
        ("password", "Password"),
    ):
        if not getattr(form, name).strip():
            errors[name] = f"{label} is required"

    if form.password != form.confirm_password:
        errors["confirm_password"] = ERROR_PASSWORDS_MISMATCH
    if form.email != form.confirm_email:
        errors["confirm_email"] = ERROR_EMAILS_MISMATCH
    return errors


class AuthService:
    """Identity and profile operations for one session's AuthState."""

    def __init__(
        self, client_factory: ClientFactory, profiles: Optional[ProfileRepository] = None
    ) -> None:
        """
        Args:
            client_factory: Creates a new Supabase client for each sign-in
            profiles: Fixed profile repository; by default one is built on
                the signed-in session's client
        """
        self.client_factory = client_factory
        self.profiles = profiles

    async def register(self, state: AuthState, form: RegisterForm) -> AuthUser:
        """
        Create an account and sign it in.

        Raises:
            FormValidationError: Missing fields or mismatched confirmations
            AuthError: Backend rejected the sign-up
        """
        errors = validate_registration(form)
        if errors:
            message = (
                errors.get("confirm_password") or errors.get("confirm_email") or ERROR_REQUIRED_FIELDS
            )
            raise FormValidationError(errors, message)

        state.set_loading(True)
        client = await self.client_factory()
        try:
            response = await client.auth.sign_up(
                {
                    "email": form.email,
                    "password": form.password,
                    "options": {
                        "data": {
                            "first_name": form.first_name,
                            "last_name": form.last_name,
                            "gender": form.gender,
                            "dob": form.dob,
                        }
                    },
                }
            )
        except Exception as e:
            logger.warning(f"Sign-up failed for {sanitize_string_for_logging(form.email)}: {e}")
            state.set_error(str(e))
            raise AuthError(str(e)) from e

        if response.user is None:
            state.set_error("Sign-up failed")
            raise AuthError("Sign-up failed")

        user = AuthUser(
            uid=str(response.user.id),
            email=response.user.email or form.email,
            first_name=form.first_name,
            last_name=form.last_name,
        )
        await self._attach_client(state, client)
        state.set_user(user)
        logger.info(f"Registered {sanitize_string_for_logging(user.email)}")
        return user

    async def sign_in(self, state: AuthState, email: str, password: str) -> AuthUser:
        """
        Sign in with email and password.

        Raises:
            AuthError: Wrong credentials or backend failure
        """
        state.set_loading(True)
        client = await self.client_factory()
        try:
            response = await client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning(f"Sign-in failed for {sanitize_string_for_logging(email)}: {e}")
            state.set_error(str(e))
            raise AuthError(str(e)) from e

        if response.user is None:
            state.set_error("Invalid login credentials")
            raise AuthError("Invalid login credentials")

        user = AuthUser(uid=str(response.user.id), email=response.user.email or email)
        await self._attach_client(state, client)
        state.set_user(user)
        return user

    async def sign_out(self, state: AuthState) -> None:
        """
        Sign this session out.

        Only the session's own client is signed out; an anonymous session
        just resets its AuthState. On a backend failure AuthState is left
        as it was.
        """
        if state.client is not None:
            try:
                await state.client.auth.sign_out()
            except Exception as e:
                logger.error(f"Error signing out: {e}")
                raise AuthError("Failed to log out") from e
        state.logout()

    async def get_profile(self, state: AuthState) -> UserProfile:
        """Profile document of the signed-in user (empty one if never saved)."""
        user = self._require_user(state)
        profile = await self._profiles(state).get_by_email(user.email)
        return profile or UserProfile(email=user.email, uid=user.uid)

    async def update_profile(
        self, state: AuthState, display_name: Optional[str], photo: Optional[str] = None
    ) -> UserProfile:
        """
        Merge display name and photo into the profile document and AuthState.

        Raises:
            AuthError: Not signed in
            FormValidationError: Photo larger than 5MB
        """
        user = self._require_user(state)
        if image_too_large(photo):
            raise FormValidationError({"photo": ERROR_PHOTO_TOO_LARGE}, ERROR_PHOTO_TOO_LARGE)

        profile = await self._profiles(state).upsert(
            user.email,
            {"display_name": display_name, "photo": photo or None, "uid": user.uid},
        )
        state.set_user(user.model_copy(update={"display_name": display_name, "photo": photo or None}))
        return profile

    @staticmethod
    async def _attach_client(state: AuthState, client: AsyncClient) -> None:
        # signing in again replaces (and signs out) the session's previous client
        previous = state.client
        state.client = client
        if previous is not None and previous is not client:
            await close_session_client(previous)

    def _profiles(self, state: AuthState) -> ProfileRepository:
        if self.profiles is not None:
            return self.profiles
        if state.client is None:
            raise AuthError(ERROR_UNAUTHORIZED)
        return ProfileRepository(state.client)

    @staticmethod
    def _require_user(state: AuthState) -> AuthUser:
        if not state.is_authenticated or state.user is None:
            raise AuthError(ERROR_UNAUTHORIZED)
        return state.user
