"""CancelOrder: a buyer cancels one of their own orders."""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class CancelOrder:
    user_id = Identifier(required=True)
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.owned_by(command.user_id, command.order_id)
        order.cancel()
        repo.add(order)

        logger.info("order_cancelled", order_id=str(order.id))
        return str(order.id)
