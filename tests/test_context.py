"""Tests for per-session storefront context"""
from storefront.context import AuthState, CatalogState, create_context
from storefront.services.models import AuthUser


class TestCreateContext:
    """Tests for create_context."""

    def test_starts_empty(self):
        ctx = create_context()

        assert ctx.cart.snapshot().is_empty
        assert ctx.wishlist.snapshot().count == 0
        assert ctx.catalog.products == []
        assert ctx.auth.is_authenticated is False

    def test_contexts_are_independent(self, sample_product):
        """Test two sessions never share a cart or wishlist."""
        first, second = create_context(), create_context()

        first.cart.add_item(sample_product)
        first.wishlist.add_to_wishlist(sample_product)

        assert second.cart.snapshot().is_empty
        assert len(second.wishlist) == 0


class TestCatalogState:
    """Tests for CatalogState reducers."""

    def test_set_products_clears_flags(self, sample_product):
        state = CatalogState(loading=True, error="old")

        state.set_products([sample_product])

        assert state.products == [sample_product]
        assert state.loading is False
        assert state.error is None

    def test_set_error_stops_loading(self):
        state = CatalogState()
        state.set_loading(True)

        state.set_error("Catalog service unavailable")

        assert state.loading is False
        assert state.error == "Catalog service unavailable"

    def test_set_selected_product(self, sample_product):
        state = CatalogState()
        state.set_selected_product(sample_product)

        assert state.selected_product is sample_product


class TestAuthState:
    """Tests for AuthState reducers."""

    def test_set_user_authenticates(self):
        state = AuthState(error="previous")
        state.set_user(AuthUser(uid="u1", email="a@b.c"))

        assert state.is_authenticated is True
        assert state.error is None

    def test_set_user_none_signs_out(self):
        state = AuthState()
        state.set_user(AuthUser(uid="u1", email="a@b.c"))
        state.set_user(None)

        assert state.is_authenticated is False

    def test_logout(self, signed_in_state):
        signed_in_state.logout()

        assert signed_in_state.user is None
        assert signed_in_state.is_authenticated is False

    def test_logout_drops_session_client(self, signed_in_state):
        signed_in_state.client = object()

        signed_in_state.logout()

        assert signed_in_state.client is None

    def test_client_hidden_from_repr(self, signed_in_state):
        signed_in_state.client = "secret-client"

        assert "secret-client" not in repr(signed_in_state)
