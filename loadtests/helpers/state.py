"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state; nothing is shared across
users. State holds the bearer token and the ids returned by earlier steps
so follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class AccountState:
    user_id: str | None = None
    token: str | None = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}


@dataclass
class ShopperState(AccountState):
    """A buyer moving from browsing through checkout."""

    craft_ids: list[str] = field(default_factory=list)
    order_id: str | None = None
    order_number: str | None = None


@dataclass
class SellerState(AccountState):
    """A seller listing crafts for moderation."""

    submitted_craft_ids: list[str] = field(default_factory=list)
