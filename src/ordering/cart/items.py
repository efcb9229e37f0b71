"""Cart line commands: AddToCart, RemoveFromCart."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.cart.cart import Cart
from ordering.domain import logger, ordering
from shared.validation import require_fields

LINE_FIELDS = ("craft_id", "title", "price", "image")


@ordering.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    craft_id = String(max_length=255)
    title = String(max_length=200)
    price = String(max_length=50)
    image = String(max_length=500)
    quantity = Integer(default=1)


@ordering.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    craft_id = String(required=True, max_length=255)


@ordering.command_handler(part_of=Cart)
class CartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        line = {name: getattr(command, name) for name in LINE_FIELDS}
        require_fields(line, *LINE_FIELDS)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            cart = Cart.create(user_id=command.user_id)

        cart.add_item(
            craft_id=command.craft_id,
            title=command.title,
            price=command.price,
            image=command.image,
            quantity=command.quantity,
        )
        repo.add(cart)

        logger.info("cart_item_added", cart_id=str(cart.id), craft_id=command.craft_id)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise ObjectNotFoundError("Cart not found")

        cart.remove_item(command.craft_id)
        repo.add(cart)

        logger.info("cart_item_removed", cart_id=str(cart.id), craft_id=command.craft_id)
        return str(cart.id)
