"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart.cart import Cart
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


def _craft_line(title, price):
    slug = title.lower().replace(" ", "-")
    return {
        "craft_id": f"craft-{slug}",
        "title": title,
        "price": price,
        "image": f"/uploads/{slug}.jpg",
    }


@pytest.fixture()
def craft_line():
    """Build a cart line for a title; the craft id is derived from the title."""
    return _craft_line


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("an empty cart", target_fixture="cart")
def empty_cart():
    cart = Cart.create(user_id="user-001")
    cart._events.clear()
    return cart


@then("the cart action fails with a validation error")
def cart_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_one_line(cart, count):
    assert len(cart.items) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_n_lines(cart, count):
    assert len(cart.items) == count
