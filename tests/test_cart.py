"""
Tests for Cart Store
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from storefront.cart import CartState, CartStore, LineItem
from storefront.errors import ERROR_INVALID_QUANTITY
from storefront.realtime import EVENT_CART_UPDATED


class TestLineItem:
    """Tests for LineItem dataclass."""

    def test_line_total(self):
        """Test line total is unit price times quantity."""
        item = LineItem(product_id=1, title="Test", unit_price=Decimal("19.99"), quantity=3)

        assert item.line_total == Decimal("59.97")

    def test_to_dict(self):
        """Test serialization to dict."""
        item = LineItem(product_id=1, title="Test", unit_price=Decimal("10.50"), image="x.png")

        data = item.to_dict()
        assert data == {"id": 1, "title": "Test", "price": 10.5, "image": "x.png", "quantity": 1}


class TestCartState:
    """Tests for CartState snapshot."""

    def test_empty_state(self):
        state = CartState()

        assert state.is_empty
        assert state.item_count == 0
        assert state.total == Decimal("0")

    def test_to_dict(self):
        state = CartState(
            items=(LineItem(product_id=1, title="A", unit_price=Decimal("2.50"), quantity=2),),
            total=Decimal("5.00"),
        )

        data = state.to_dict()
        assert data["total"] == 5.0
        assert data["item_count"] == 2
        assert len(data["items"]) == 1


class TestCartStore:
    """Tests for CartStore mutations."""

    @pytest.fixture
    def cart(self):
        return CartStore()

    def test_add_new_product(self, cart, sample_product):
        """Test adding a product appends a line with quantity 1."""
        state = cart.add_item(sample_product)

        assert len(state.items) == 1
        assert state.items[0].product_id == 1
        assert state.items[0].quantity == 1
        assert state.total == Decimal("109.95")

    def test_add_same_product_increments_quantity(self, cart, sample_product):
        """Test adding a product twice keeps one line with quantity 2."""
        cart.add_item(sample_product)
        state = cart.add_item(sample_product)

        assert len(state.items) == 1
        assert state.items[0].quantity == 2
        assert state.total == Decimal("219.90")

    def test_add_preserves_insertion_order(self, cart, make_product):
        """Test new lines are appended; re-adding does not move a line."""
        first, second = make_product(1, 10), make_product(2, 20)

        cart.add_item(first)
        cart.add_item(second)
        state = cart.add_item(first)

        assert [i.product_id for i in state.items] == [1, 2]

    def test_mixed_adds_scenario(self, cart):
        """Test adding {1,10} twice and {2,5} once gives two lines totalling 25."""
        cart.add_item({"id": 1, "price": 10})
        cart.add_item({"id": 1, "price": 10})
        state = cart.add_item({"id": 2, "price": 5})

        assert [(i.product_id, i.quantity) for i in state.items] == [(1, 2), (2, 1)]
        assert state.total == Decimal("25")

    def test_add_from_mapping(self, cart):
        """Test a plain mapping snapshot is accepted."""
        state = cart.add_item({"id": "abc", "title": "Mug", "price": "7.25"})

        assert state.items[0].product_id == "abc"
        assert state.items[0].unit_price == Decimal("7.25")

    @pytest.mark.parametrize("price", ["abc", -10, "nan", "Infinity", None])
    def test_add_mapping_with_bad_price_rejected(self, cart, make_product, price):
        """Test an invalid price never reaches the cart or its total."""
        cart.add_item(make_product(2, 5))
        events = []
        cart.subscribe(events.append)

        with pytest.raises(ValidationError):
            cart.add_item({"id": 1, "price": price})

        assert 1 not in cart
        assert cart.total == Decimal("5")
        assert events == []

    def test_valid_add_after_rejected_price_keeps_total_finite(self, cart, make_product):
        with pytest.raises(ValidationError):
            cart.add_item({"id": 1, "price": "nan"})

        state = cart.add_item(make_product(2, "3.50"))

        assert state.total.is_finite()
        assert state.total == Decimal("3.50")

    def test_add_copies_snapshot_fields(self, cart, sample_product):
        """Test the line item carries title, price and image from the product."""
        state = cart.add_item(sample_product)
        item = state.items[0]

        assert item.title == sample_product.title
        assert item.unit_price == sample_product.price
        assert item.image == sample_product.image

    def test_remove_item(self, cart, make_product):
        cart.add_item(make_product(1, 10))
        cart.add_item(make_product(2, 20))

        state = cart.remove_item(1)

        assert [i.product_id for i in state.items] == [2]
        assert state.total == Decimal("20")

    def test_remove_absent_item_is_noop(self, cart, make_product):
        """Test removing an id that is not in the cart changes nothing."""
        cart.add_item(make_product(1, 10))
        events = []
        cart.subscribe(events.append)

        state = cart.remove_item(99)

        assert len(state.items) == 1
        assert state.total == Decimal("10")
        assert events == []

    def test_set_quantity(self, cart, make_product):
        cart.add_item(make_product(1, "12.50"))

        state = cart.set_quantity(1, 4)

        assert state.items[0].quantity == 4
        assert state.total == Decimal("50.00")

    @pytest.mark.parametrize("quantity", [0, -1, -100])
    def test_set_quantity_below_one_rejected(self, cart, make_product, quantity):
        """Test quantities below 1 raise and leave the cart untouched."""
        cart.add_item(make_product(1, 10))

        with pytest.raises(ValueError, match=ERROR_INVALID_QUANTITY):
            cart.set_quantity(1, quantity)

        assert cart.get_item(1).quantity == 1
        assert cart.total == Decimal("10")

    @pytest.mark.parametrize("quantity", [1.5, "2", True])
    def test_set_quantity_non_integer_rejected(self, cart, make_product, quantity):
        cart.add_item(make_product(1, 10))

        with pytest.raises(ValueError):
            cart.set_quantity(1, quantity)

    def test_set_quantity_absent_item_is_noop(self, cart):
        state = cart.set_quantity(42, 3)

        assert state.is_empty

    def test_total_matches_lines_after_every_mutation(self, cart, make_product):
        """Test total always equals the sum of price * quantity."""
        products = [make_product(1, "0.10"), make_product(2, "0.20"), make_product(3, "19.99")]

        states = [cart.add_item(p) for p in products]
        states.append(cart.add_item(products[0]))
        states.append(cart.set_quantity(2, 7))
        states.append(cart.remove_item(3))

        for state in states:
            expected = sum((i.unit_price * i.quantity for i in state.items), Decimal("0"))
            assert state.total == expected

        assert cart.total == Decimal("1.60")

    def test_empty_cart_total_is_zero(self, cart, make_product):
        cart.add_item(make_product(1, 10))
        state = cart.remove_item(1)

        assert state.is_empty
        assert state.total == Decimal("0")

    def test_snapshot_is_a_copy(self, cart, make_product):
        """Test mutating a snapshot line does not leak into the store."""
        cart.add_item(make_product(1, 10))

        state = cart.snapshot()
        state.items[0].quantity = 50

        assert cart.get_item(1).quantity == 1

    def test_item_count_and_contains(self, cart, make_product):
        cart.add_item(make_product(1, 10))
        cart.add_item(make_product(1, 10))
        cart.add_item(make_product(2, 5))

        assert cart.item_count == 3
        assert len(cart) == 2
        assert 1 in cart
        assert 3 not in cart


class TestCartEvents:
    """Tests for cart change notifications."""

    def test_listener_sees_updated_total(self, make_product):
        """Test subscribers are notified after the total is recomputed."""
        cart = CartStore()
        seen = []
        cart.subscribe(lambda event: seen.append((event.event, event.action, cart.total)))

        cart.add_item(make_product(1, 10))
        cart.set_quantity(1, 3)

        assert seen == [
            (EVENT_CART_UPDATED, "add", Decimal("10")),
            (EVENT_CART_UPDATED, "set_quantity", Decimal("30")),
        ]

    def test_event_carries_snapshot(self, make_product):
        cart = CartStore()
        events = []
        cart.subscribe(events.append)

        cart.add_item(make_product(1, 10))

        assert isinstance(events[0].data, CartState)
        assert events[0].data.total == Decimal("10")

    def test_unsubscribe(self, make_product):
        cart = CartStore()
        events = []
        unsubscribe = cart.subscribe(events.append)

        unsubscribe()
        cart.add_item(make_product(1, 10))

        assert events == []

    def test_rejected_quantity_does_not_notify(self, make_product):
        cart = CartStore()
        cart.add_item(make_product(1, 10))
        events = []
        cart.subscribe(events.append)

        with pytest.raises(ValueError):
            cart.set_quantity(1, 0)

        assert events == []
