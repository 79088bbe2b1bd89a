"""Auth package: Supabase-backed accounts and in-memory web sessions."""
from .service import AuthService, RegisterForm, validate_registration
from .session import SessionStore, WebSession

__all__ = [
    "AuthService",
    "RegisterForm",
    "validate_registration",
    "SessionStore",
    "WebSession",
]
