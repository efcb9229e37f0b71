"""ApproveCraft / RejectCraft: moderator decisions on a listing."""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.craft.craft import Craft
from catalogue.domain import catalogue, logger


@catalogue.command(part_of="Craft")
class ApproveCraft:
    craft_id = Identifier(required=True)


@catalogue.command(part_of="Craft")
class RejectCraft:
    craft_id = Identifier(required=True)


@catalogue.command_handler(part_of=Craft)
class ModerateCraftHandler:
    @handle(ApproveCraft)
    def approve_craft(self, command):
        repo = current_domain.repository_for(Craft)
        craft = repo.get(command.craft_id)
        craft.approve()
        repo.add(craft)

        logger.info("craft_approved", craft_id=str(craft.id))

    @handle(RejectCraft)
    def reject_craft(self, command):
        repo = current_domain.repository_for(Craft)
        craft = repo.get(command.craft_id)
        craft.reject()
        repo.add(craft)

        logger.info("craft_rejected", craft_id=str(craft.id))
