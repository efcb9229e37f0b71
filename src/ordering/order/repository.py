from protean.exceptions import ObjectNotFoundError

from ordering.domain import ordering
from ordering.order.order import Order


def _newest_first(orders):
    return sorted(orders, key=lambda o: o.created_at, reverse=True)


@ordering.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        return _newest_first(self._dao.query.filter(user_id=str(user_id)).all().items)

    def everything(self) -> list[Order]:
        return _newest_first(self._dao.query.all().items)

    def owned_by(self, user_id, order_id) -> Order:
        """Fetch an order, hiding orders that belong to someone else."""
        orders = self._dao.query.filter(id=str(order_id), user_id=str(user_id)).all().items
        if not orders:
            raise ObjectNotFoundError("Order not found")
        return orders[0]
