"""Ordering bounded context: shopping carts and the orders they check out into.

Both aggregates are standard CQRS aggregates. A cart is a live, per-user
working set with a derived total; an order is a frozen snapshot of a cart
plus payment and fulfillment status.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
