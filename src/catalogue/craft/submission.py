"""SubmitCraft: a seller lists a handicraft for moderation.

The image has already been written by the upload storage by the time the
command is built; the command only carries its public URL.
"""

from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.craft.craft import Craft
from catalogue.domain import catalogue, logger
from shared.money import parse_price
from shared.validation import require_fields

LISTING_FIELDS = (
    "seller_full_name",
    "seller_email",
    "seller_phone",
    "item_name",
    "description",
    "price",
    "region",
    "artist_name",
)


def validate_listing(listing: dict) -> None:
    """Reject a listing with blank fields or a price the cart could not read."""
    require_fields(listing, *LISTING_FIELDS)
    parse_price(listing["price"])


@catalogue.command(part_of="Craft")
class SubmitCraft:
    seller_id = Identifier(required=True)
    seller_full_name = String(max_length=150)
    seller_email = String(max_length=254)
    seller_phone = String(max_length=20)
    item_name = String(max_length=200)
    description = Text()
    price = String(max_length=50)
    region = String(max_length=100)
    artist_name = String(max_length=150)
    image_url = String(max_length=500)


@catalogue.command_handler(part_of=Craft)
class SubmitCraftHandler:
    @handle(SubmitCraft)
    def submit_craft(self, command):
        listing = {name: getattr(command, name) for name in LISTING_FIELDS}
        validate_listing(listing)
        if not command.image_url:
            raise ValidationError({"image": ["Image is required"]})

        craft = Craft.submit(
            seller_id=command.seller_id,
            image_url=command.image_url,
            **{name: value.strip() for name, value in listing.items()},
        )
        current_domain.repository_for(Craft).add(craft)

        logger.info("craft_submitted", craft_id=str(craft.id), seller_id=str(command.seller_id))
        return str(craft.id)
