"""Craft aggregate: a seller's handicraft listing.

A craft enters the catalogue as ``pending`` and becomes visible to buyers
once a moderator approves it. Moderation decisions are not a one-way
street: a rejected craft may later be approved and vice versa, and repeating
a decision is a harmless no-op. Nothing ever moves a craft back to
``pending``.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, String, Text

from catalogue.craft.events import CraftApproved, CraftRejected, CraftSubmitted
from catalogue.domain import catalogue
from shared.serialization import document_header


class CraftStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@catalogue.aggregate
class Craft:
    seller_full_name = String(required=True, max_length=150)
    seller_email = String(required=True, max_length=254)
    seller_phone = String(required=True, max_length=20)
    item_name = String(required=True, max_length=200)
    description = Text(required=True)
    price = String(required=True, max_length=50)
    region = String(required=True, max_length=100)
    artist_name = String(required=True, max_length=150)
    image_url = String(required=True, max_length=500)
    status = String(choices=CraftStatus, default=CraftStatus.PENDING.value)
    seller_id = Identifier(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def submit(cls, seller_id, **listing):
        now = datetime.now(UTC)
        craft = cls(
            seller_id=seller_id,
            status=CraftStatus.PENDING.value,
            created_at=now,
            updated_at=now,
            **listing,
        )
        craft.raise_(
            CraftSubmitted(
                craft_id=str(craft.id),
                seller_id=str(seller_id),
                item_name=craft.item_name,
                price=craft.price,
                submitted_at=now,
            )
        )
        return craft

    def approve(self):
        if self.status == CraftStatus.APPROVED.value:
            return

        previous = self.status
        self.status = CraftStatus.APPROVED.value
        self.updated_at = datetime.now(UTC)
        self.raise_(CraftApproved(craft_id=str(self.id), previous_status=previous, approved_at=self.updated_at))

    def reject(self):
        if self.status == CraftStatus.REJECTED.value:
            return

        previous = self.status
        self.status = CraftStatus.REJECTED.value
        self.updated_at = datetime.now(UTC)
        self.raise_(CraftRejected(craft_id=str(self.id), previous_status=previous, rejected_at=self.updated_at))

    def to_document(self) -> dict:
        return {
            **document_header(self),
            "sellerFullName": self.seller_full_name,
            "sellerEmail": self.seller_email,
            "sellerPhone": self.seller_phone,
            "itemName": self.item_name,
            "description": self.description,
            "price": self.price,
            "region": self.region,
            "artistName": self.artist_name,
            "imageUrl": self.image_url,
            "status": self.status,
            "sellerId": str(self.seller_id),
        }
