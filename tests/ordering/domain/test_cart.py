"""Tests for the Cart aggregate: lines, totals and events."""

import pytest
from ordering.cart.cart import Cart
from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from protean.exceptions import ValidationError


@pytest.fixture()
def cart():
    cart = Cart.create(user_id="user-001")
    cart._events.clear()
    return cart


class TestCreate:
    def test_new_cart_is_empty(self, cart):
        assert cart.is_empty
        assert cart.total_amount == 0.0
        assert cart.user_id == "user-001"


class TestAddItem:
    def test_first_add_creates_line_of_one(self, cart, gond_painting):
        cart.add_item(**gond_painting)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1
        assert cart.total_amount == pytest.approx(30.0)

    def test_repeat_add_bumps_quantity_by_one(self, cart, gond_painting):
        cart.add_item(**gond_painting)
        cart.add_item(**gond_painting)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.total_amount == pytest.approx(60.0)

    def test_requested_quantity_is_not_honoured(self, cart, gond_painting):
        cart.add_item(**gond_painting, quantity=5)
        assert cart.items[0].quantity == 1
        cart.add_item(**gond_painting, quantity=5)
        assert cart.items[0].quantity == 2

    def test_total_sums_every_line(self, cart, gond_painting, dokra_horse):
        cart.add_item(**gond_painting)
        cart.add_item(**dokra_horse)
        cart.add_item(**dokra_horse)
        assert cart.total_amount == pytest.approx(30.0 + 2 * 45.0)

    def test_lines_keep_insertion_order(self, cart, gond_painting, dokra_horse):
        cart.add_item(**dokra_horse)
        cart.add_item(**gond_painting)
        assert [line.craft_id for line in cart.lines] == ["craft-dokra", "craft-gond"]

    def test_unparseable_price_leaves_cart_untouched(self, cart, gond_painting):
        with pytest.raises(ValidationError):
            cart.add_item(**{**gond_painting, "price": "priceless"})
        assert cart.is_empty
        assert cart._events == []

    def test_raises_item_added(self, cart, gond_painting):
        cart.add_item(**gond_painting)
        cart.add_item(**gond_painting)
        events = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert [e.quantity for e in events] == [1, 2]
        assert events[-1].total_amount == pytest.approx(60.0)


class TestRemoveItem:
    def test_remove_drops_the_line(self, cart, gond_painting, dokra_horse):
        cart.add_item(**gond_painting)
        cart.add_item(**dokra_horse)
        cart.remove_item("craft-gond")
        assert [line.craft_id for line in cart.lines] == ["craft-dokra"]
        assert cart.total_amount == pytest.approx(45.0)

    def test_remove_drops_every_unit(self, cart, gond_painting):
        cart.add_item(**gond_painting)
        cart.add_item(**gond_painting)
        cart.remove_item("craft-gond")
        assert cart.is_empty
        assert cart.total_amount == 0.0

    def test_removing_absent_craft_changes_nothing(self, cart, gond_painting):
        cart.add_item(**gond_painting)
        cart._events.clear()

        cart.remove_item("craft-unknown")

        assert len(cart.items) == 1
        assert cart.total_amount == pytest.approx(30.0)
        event = cart._events[0]
        assert isinstance(event, CartItemRemoved)
        assert event.lines_removed == 0


class TestClear:
    def test_clear_empties_cart(self, cart, gond_painting, dokra_horse):
        cart.add_item(**gond_painting)
        cart.add_item(**dokra_horse)
        cart.clear()
        assert cart.is_empty
        assert cart.total_amount == 0.0
        assert isinstance(cart._events[-1], CartCleared)


class TestDocument:
    def test_document_uses_wire_names(self, cart, gond_painting):
        cart.add_item(**gond_painting)
        document = cart.to_document()
        assert document["userId"] == "user-001"
        assert document["totalAmount"] == pytest.approx(30.0)
        assert document["items"] == [
            {
                "craftId": "craft-gond",
                "craftTitle": "Gond painting",
                "craftPrice": "$30",
                "craftImage": "/uploads/gond.jpg",
                "quantity": 1,
            }
        ]
