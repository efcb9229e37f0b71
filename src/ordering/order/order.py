"""Order aggregate (CQRS): a checked-out cart, frozen at the moment of purchase.

Line items are copies of the cart lines, never references to catalogue
entries, so later edits to a craft do not reach historical orders. The
pricing breakdown is computed once at checkout and is not recomputed.

Two statuses move independently:

- ``payment_status``: pending -> completed | failed | refunded
- ``order_status`` (fulfillment): pending -> confirmed -> shipped -> delivered,
  or cancelled

Administrators may set either status to any value at any time. Buyers may
only cancel, and only while the order is neither delivered nor already
cancelled.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from ordering.domain import ordering
from ordering.order.events import OrderCancelled, OrderPlaced, OrderStatusUpdated
from shared.errors import InvalidTransitionError
from shared.serialization import document_header

_TOTAL_TOLERANCE = 1e-6


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    UPI = "upi"
    NET_BANKING = "net_banking"
    COD = "cod"


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Fulfillment states from which a buyer can no longer cancel
_NOT_CANCELLABLE = frozenset({OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value})

SHIPPING_ADDRESS_FIELDS = ("full_name", "address", "city", "state", "zip_code", "country", "phone")


@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships to, as entered at checkout."""

    full_name = String(required=True, max_length=150)
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    phone = String(required=True, max_length=20)

    def to_document(self) -> dict:
        return {
            "fullName": self.full_name,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zipCode": self.zip_code,
            "country": self.country,
            "phone": self.phone,
        }


@ordering.entity(part_of="Order")
class OrderItem:
    craft_id = String(required=True, max_length=255)
    title = String(required=True, max_length=200)
    price = String(required=True, max_length=50)
    image = String(required=True, max_length=500)
    quantity = Integer(required=True, min_value=1)
    position = Integer(default=0)

    def to_document(self) -> dict:
        return {
            "craftId": self.craft_id,
            "craftTitle": self.title,
            "craftPrice": self.price,
            "craftImage": self.image,
            "quantity": self.quantity,
        }


@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    order_number = String(required=True, max_length=50, unique=True)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress, required=True)
    payment_method = String(required=True, choices=PaymentMethod)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    order_status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    subtotal = Float(required=True, min_value=0.0)
    shipping_cost = Float(required=True, min_value=0.0)
    tax = Float(required=True, min_value=0.0)
    total_amount = Float(required=True, min_value=0.0)
    notes = Text(default="")
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_is_sum_of_parts(self):
        if None in (self.subtotal, self.shipping_cost, self.tax, self.total_amount):
            return
        expected = self.subtotal + self.shipping_cost + self.tax
        if abs(self.total_amount - expected) > _TOTAL_TOLERANCE:
            raise ValidationError({"total_amount": ["Total must equal subtotal + shipping + tax"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, order_number, lines, shipping_address, payment_method, pricing, notes=None):
        """Build an order from snapshot lines and a computed ``Pricing``."""
        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            order_number=order_number,
            shipping_address=ShippingAddress(**shipping_address),
            payment_method=payment_method,
            payment_status=PaymentStatus.PENDING.value,
            order_status=OrderStatus.PENDING.value,
            subtotal=pricing.subtotal,
            shipping_cost=pricing.shipping_cost,
            tax=pricing.tax,
            total_amount=pricing.total_amount,
            notes=notes or "",
            created_at=now,
            updated_at=now,
        )
        for position, line in enumerate(lines):
            order.add_items(
                OrderItem(
                    craft_id=line["craft_id"],
                    title=line["title"],
                    price=line["price"],
                    image=line["image"],
                    quantity=line["quantity"],
                    position=position,
                )
            )

        return order

    def finalize(self, order_number):
        """Take the order number drawn just before the first write and announce the order."""
        self.order_number = order_number
        self.raise_(
            OrderPlaced(
                order_id=str(self.id),
                user_id=str(self.user_id),
                order_number=self.order_number,
                item_count=len(self.items),
                payment_method=self.payment_method,
                subtotal=self.subtotal,
                shipping_cost=self.shipping_cost,
                tax=self.tax,
                total_amount=self.total_amount,
                placed_at=self.created_at,
            )
        )

    # -------------------------------------------------------------------
    # Status changes
    # -------------------------------------------------------------------
    def update_status(self, payment_status=None, order_status=None):
        """Set whichever statuses are given. No ordering between states is enforced."""
        errors = {}
        if payment_status and payment_status not in {s.value for s in PaymentStatus}:
            errors["payment_status"] = [f"Invalid payment status: {payment_status}"]
        if order_status and order_status not in {s.value for s in OrderStatus}:
            errors["order_status"] = [f"Invalid order status: {order_status}"]
        if errors:
            raise ValidationError(errors)

        previous_payment, previous_order = self.payment_status, self.order_status
        with atomic_change(self):
            if payment_status:
                self.payment_status = payment_status
            if order_status:
                self.order_status = order_status
            self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusUpdated(
                order_id=str(self.id),
                payment_status=self.payment_status,
                order_status=self.order_status,
                previous_payment_status=previous_payment,
                previous_order_status=previous_order,
            )
        )

    def cancel(self):
        if self.order_status in _NOT_CANCELLABLE:
            raise InvalidTransitionError("Cannot cancel this order")

        previous = self.order_status
        self.order_status = OrderStatus.CANCELLED.value
        self.updated_at = datetime.now(UTC)
        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                user_id=str(self.user_id),
                previous_status=previous,
                cancelled_at=self.updated_at,
            )
        )

    # -------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------
    @property
    def lines(self) -> list[OrderItem]:
        return sorted(self.items, key=lambda i: i.position or 0)

    def to_document(self) -> dict:
        return {
            **document_header(self),
            "userId": str(self.user_id),
            "orderNumber": self.order_number,
            "items": [item.to_document() for item in self.lines],
            "shippingAddress": self.shipping_address.to_document() if self.shipping_address else None,
            "paymentMethod": self.payment_method,
            "paymentStatus": self.payment_status,
            "orderStatus": self.order_status,
            "subtotal": self.subtotal,
            "shippingCost": self.shipping_cost,
            "tax": self.tax,
            "totalAmount": self.total_amount,
            "notes": self.notes,
        }
