"""UpdateOrderStatus: administrative status override."""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    payment_status = String(max_length=20)
    order_status = String(max_length=20)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_status(payment_status=command.payment_status, order_status=command.order_status)
        repo.add(order)

        logger.info(
            "order_status_updated",
            order_id=str(order.id),
            payment_status=order.payment_status,
            order_status=order.order_status,
        )
        return str(order.id)
