"""Cart lifecycle commands: CreateCart (get-or-create), ClearCart."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.cart.cart import Cart
from ordering.domain import logger, ordering


@ordering.command(part_of="Cart")
class CreateCart:
    """Ensure the user has a cart. Returns the existing cart when there is one."""

    user_id = Identifier(required=True)


@ordering.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


@ordering.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            cart = Cart.create(user_id=command.user_id)
            repo.add(cart)
            logger.info("cart_created", cart_id=str(cart.id), user_id=str(command.user_id))
        return str(cart.id)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise ObjectNotFoundError("Cart not found")

        cart.clear()
        repo.add(cart)

        logger.info("cart_cleared", cart_id=str(cart.id))
        return str(cart.id)
