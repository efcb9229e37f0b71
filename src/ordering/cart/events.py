"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Cart")
class CartItemAdded:
    """A craft was put in the cart, or its line quantity went up by one."""

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    craft_id = String(required=True)
    quantity = Integer(required=True)
    total_amount = Float(required=True)


@ordering.event(part_of="Cart")
class CartItemRemoved:
    """Every line for a craft was taken out of the cart."""

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    craft_id = String(required=True)
    lines_removed = Integer(required=True)
    total_amount = Float(required=True)


@ordering.event(part_of="Cart")
class CartCleared:
    """All lines were removed, either by the owner or by checkout."""

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
