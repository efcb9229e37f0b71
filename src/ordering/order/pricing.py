"""Checkout pricing and order numbering.

Shipping is a flat fee unless the subtotal is strictly greater than the
free-shipping threshold; tax is a flat rate on the subtotal. Nothing is
rounded here; rounding is a presentation concern.
"""

import secrets
import string
import time
from dataclasses import dataclass

FREE_SHIPPING_THRESHOLD = 100.0
FLAT_SHIPPING_FEE = 10.0
TAX_RATE = 0.08

ORDER_NUMBER_PREFIX = "TC"
_SUFFIX_ALPHABET = string.digits + string.ascii_uppercase
_SUFFIX_LENGTH = 5


@dataclass(frozen=True)
class Pricing:
    subtotal: float
    shipping_cost: float
    tax: float
    total_amount: float


def price_order(subtotal: float) -> Pricing:
    shipping_cost = 0.0 if subtotal > FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING_FEE
    tax = subtotal * TAX_RATE
    return Pricing(
        subtotal=subtotal,
        shipping_cost=shipping_cost,
        tax=tax,
        total_amount=subtotal + shipping_cost + tax,
    )


def generate_order_number(now_ms: int | None = None) -> str:
    """``TC`` + millisecond timestamp + five random base36 characters."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{ORDER_NUMBER_PREFIX}{now_ms}{suffix}"
