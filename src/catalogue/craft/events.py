"""Domain events for the Craft aggregate."""

from protean.fields import DateTime, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Craft")
class CraftSubmitted:
    """A seller submitted a listing for moderation."""

    craft_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    item_name: String(required=True)
    price: String(required=True)
    submitted_at: DateTime(required=True)


@catalogue.event(part_of="Craft")
class CraftApproved:
    """A moderator published a listing."""

    craft_id: Identifier(required=True)
    previous_status: String(required=True)
    approved_at: DateTime(required=True)


@catalogue.event(part_of="Craft")
class CraftRejected:
    """A moderator turned a listing down."""

    craft_id: Identifier(required=True)
    previous_status: String(required=True)
    rejected_at: DateTime(required=True)
