"""Display-price parsing.

Listings carry their price as the seller typed it (``"$25"``, ``"₹1,200"``,
``"Rs. 450"``). Cart and order arithmetic needs the number behind it.
"""

import math
import re

from protean.exceptions import ValidationError

# Leading currency decoration: symbols, ISO codes and the "Rs." abbreviation
_CURRENCY_PREFIX = re.compile(r"^(?:[A-Za-z]{3}\b|Rs\.?|[^\d\s.,+-])*\s*", re.IGNORECASE)


def parse_price(price) -> float:
    """Return the numeric amount of a display price.

    >>> parse_price("$25")
    25.0
    >>> parse_price("USD 1,299.50")
    1299.5
    """
    if isinstance(price, int | float):
        amount = float(price)
    else:
        text = (price or "").strip()
        stripped = _CURRENCY_PREFIX.sub("", text, count=1).replace(",", "").strip()
        try:
            amount = float(stripped)
        except ValueError:
            raise ValidationError({"price": [f"Invalid price: {price!r}"]}) from None

    if not math.isfinite(amount):
        raise ValidationError({"price": [f"Invalid price: {price!r}"]})
    if amount < 0:
        raise ValidationError({"price": [f"Price cannot be negative: {price!r}"]})
    return amount
