"""BDD tests for checkout pricing, run through the command handlers."""

import pytest
from ordering.cart.cart import Cart
from ordering.cart.items import AddToCart
from ordering.order.checkout import create_order
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from shared.errors import EmptyCartError

scenarios("features/checkout_pricing.feature")

_TIMES = {"once": 1, "twice": 2, "three times": 3}


@pytest.fixture()
def outcome():
    return {"order": None, "exc": None}


@given(parsers.cfparse('a cart belonging to "{user_id}"'), target_fixture="user_id")
def cart_owner(user_id):
    return user_id


@given(parsers.cfparse('the cart holds "{title}" priced "{price}" {times}'))
def cart_holds(user_id, craft_line, title, price, times):
    for _ in range(_TIMES[times]):
        current_domain.process(AddToCart(user_id=user_id, **craft_line(title, price)), asynchronous=False)


@when("the cart is checked out")
def check_out(user_id, shipping_address, outcome):
    try:
        outcome["order"] = create_order(user_id, shipping_address, "upi")
    except EmptyCartError as exc:
        outcome["exc"] = exc


@then(parsers.cfparse("the order subtotal is {amount:f}"))
def order_subtotal(outcome, amount):
    assert outcome["order"].subtotal == pytest.approx(amount)


@then(parsers.cfparse("the order shipping is {amount:f}"))
def order_shipping(outcome, amount):
    assert outcome["order"].shipping_cost == pytest.approx(amount)


@then(parsers.cfparse("the order tax is {amount:f}"))
def order_tax(outcome, amount):
    assert outcome["order"].tax == pytest.approx(amount)


@then(parsers.cfparse("the order total is {amount:f}"))
def order_total(outcome, amount):
    assert outcome["order"].total_amount == pytest.approx(amount)


@then("the cart is empty")
def cart_is_empty(user_id):
    assert current_domain.repository_for(Cart).for_user(user_id).is_empty


@then("checkout fails because the cart is empty")
def checkout_fails(outcome):
    assert outcome["order"] is None
    assert isinstance(outcome["exc"], EmptyCartError)
