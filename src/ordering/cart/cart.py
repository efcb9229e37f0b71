"""Shopping Cart aggregate (CQRS): one live cart per user.

Each line is a snapshot of the craft taken when it was added (title,
display price, image), so the cart never reaches back into the catalogue.
``total_amount`` is derived: it is recomputed from the lines after every
mutation and must always equal ``sum(parse_price(price) * quantity)``.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from ordering.domain import ordering
from shared.money import parse_price
from shared.serialization import document_header

_TOTAL_TOLERANCE = 1e-6


@ordering.entity(part_of="Cart")
class CartItem:
    craft_id = String(required=True, max_length=255)
    title = String(required=True, max_length=200)
    price = String(required=True, max_length=50)
    image = String(required=True, max_length=500)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self) -> float:
        return parse_price(self.price) * self.quantity

    def to_document(self) -> dict:
        return {
            "craftId": self.craft_id,
            "craftTitle": self.title,
            "craftPrice": self.price,
            "craftImage": self.image,
            "quantity": self.quantity,
        }


@ordering.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    total_amount = Float(default=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_matches_lines(self):
        expected = sum(item.line_total for item in self.items)
        if abs((self.total_amount or 0.0) - expected) > _TOTAL_TOLERANCE:
            raise ValidationError({"total_amount": ["Cart total does not match its items"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, total_amount=0.0, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    @property
    def lines(self) -> list[CartItem]:
        """Lines in the order they were first added."""
        return sorted(self.items, key=lambda i: i.added_at or self.created_at)

    def add_item(self, craft_id, title, price, image, quantity=1):
        """Add a craft, or bump its existing line by exactly one.

        ``quantity`` is accepted for API symmetry but is not honoured: a new
        line always starts at 1 and a repeat add always increments by 1.
        """
        parse_price(price)

        existing = next((i for i in self.items if i.craft_id == str(craft_id)), None)
        now = datetime.now(UTC)

        with atomic_change(self):
            if existing:
                existing.quantity += 1
                line_quantity = existing.quantity
            else:
                self.add_items(
                    CartItem(
                        craft_id=str(craft_id),
                        title=title,
                        price=price,
                        image=image,
                        quantity=1,
                        added_at=now,
                    )
                )
                line_quantity = 1
            self.recompute_total()
            self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                craft_id=str(craft_id),
                quantity=line_quantity,
                total_amount=self.total_amount,
            )
        )

    def remove_item(self, craft_id):
        """Drop every line for ``craft_id``. Unknown ids leave the lines as they are."""
        matching = [i for i in self.items if i.craft_id == str(craft_id)]

        with atomic_change(self):
            for item in matching:
                self.remove_items(item)
            self.recompute_total()
            self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                craft_id=str(craft_id),
                lines_removed=len(matching),
                total_amount=self.total_amount,
            )
        )

    def clear(self):
        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
            self.total_amount = 0.0
            self.updated_at = datetime.now(UTC)

        self.raise_(CartCleared(cart_id=str(self.id), user_id=str(self.user_id)))

    def recompute_total(self):
        self.total_amount = sum(item.line_total for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_document(self) -> dict:
        return {
            **document_header(self),
            "userId": str(self.user_id),
            "items": [item.to_document() for item in self.lines],
            "totalAmount": self.total_amount,
        }

