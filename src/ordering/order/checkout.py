"""Checkout: turn the user's cart into an order, then empty the cart.

The two writes are deliberately separate units of work. ``PlaceOrder``
persists the order; ``create_order`` then issues ``ClearCart``. If the
process dies between them the order exists and the cart still holds its
lines, so a retry can check the same cart out twice.
"""

import json

from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.cart.cart import Cart
from ordering.cart.management import ClearCart
from ordering.domain import logger, ordering
from ordering.order.order import SHIPPING_ADDRESS_FIELDS, Order
from ordering.order.pricing import generate_order_number, price_order
from shared.errors import EmptyCartError
from shared.validation import require_fields


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: address dict
    payment_method = String(required=True, max_length=20)
    notes = Text()


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )
        if not isinstance(address, dict):
            raise ValidationError({"shipping_address": ["Shipping address is required"]})
        require_fields(address, *SHIPPING_ADDRESS_FIELDS)

        cart = current_domain.repository_for(Cart).for_user(command.user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError()

        pricing = price_order(cart.total_amount)
        lines = [
            {
                "craft_id": item.craft_id,
                "title": item.title,
                "price": item.price,
                "image": item.image,
                "quantity": item.quantity,
            }
            for item in cart.lines
        ]

        order = Order.place(
            user_id=command.user_id,
            order_number=generate_order_number(),
            lines=lines,
            shipping_address={name: address[name] for name in SHIPPING_ADDRESS_FIELDS},
            payment_method=command.payment_method,
            pricing=pricing,
            notes=command.notes,
        )
        order.finalize(generate_order_number())
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            order_number=order.order_number,
            total_amount=order.total_amount,
        )
        return str(order.id)


def create_order(user_id, shipping_address: dict, payment_method: str, notes: str | None = None) -> Order:
    """Check out ``user_id``'s cart. Must run inside the ordering domain context."""
    order_id = current_domain.process(
        PlaceOrder(
            user_id=user_id,
            shipping_address=json.dumps(shipping_address),
            payment_method=payment_method,
            notes=notes,
        ),
        asynchronous=False,
    )
    current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    return current_domain.repository_for(Order).get(order_id)
