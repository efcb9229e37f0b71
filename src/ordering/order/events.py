"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into a new order."""

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    order_number = String(required=True)
    item_count = Integer(required=True)
    payment_method = String(required=True)
    subtotal = Float(required=True)
    shipping_cost = Float(required=True)
    tax = Float(required=True)
    total_amount = Float(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusUpdated:
    """An administrator changed the payment or fulfillment status."""

    order_id = Identifier(required=True)
    payment_status = String(required=True)
    order_status = String(required=True)
    previous_payment_status = String(required=True)
    previous_order_status = String(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """The buyer cancelled an order that had not been delivered."""

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
