"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test_key")
os.environ.setdefault("CATALOG_API_URL", "https://catalog.test")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")

from storefront.context import AuthState, create_context
from storefront.services.models import AuthUser, Product


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client"""
    client = Mock()

    # Mock table operations
    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.upsert.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    # Mock auth operations
    client.auth = Mock()
    client.auth.sign_up = AsyncMock()
    client.auth.sign_in_with_password = AsyncMock()
    client.auth.sign_out = AsyncMock()

    return client


@pytest.fixture
def sample_product_data():
    """Sample catalog record"""
    return {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "description": "Fits 15 inch laptops",
        "category": "men's clothing",
        "image": "https://catalog.test/img/1.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }


@pytest.fixture
def sample_product(sample_product_data):
    """Sample validated product"""
    return Product.model_validate(sample_product_data)


@pytest.fixture
def make_product():
    """Factory for products with a given id and price"""
    def _make(product_id, price, title=None, category="electronics"):
        return Product(
            id=product_id,
            title=title or f"Product {product_id}",
            price=Decimal(str(price)),
            category=category,
        )
    return _make


@pytest.fixture
def context():
    """Empty storefront context"""
    return create_context()


@pytest.fixture
def signed_in_state():
    """AuthState with a regular user signed in"""
    state = AuthState()
    state.set_user(AuthUser(uid="user-123", email="user@example.com"))
    return state


@pytest.fixture
def admin_state():
    """AuthState with the admin account signed in"""
    state = AuthState()
    state.set_user(AuthUser(uid="admin-1", email="Admin@Example.com"))
    return state
