from catalogue.craft.craft import Craft
from catalogue.domain import catalogue


@catalogue.repository(part_of=Craft)
class CraftRepository:
    def with_status(self, status: str) -> list[Craft]:
        """Crafts in ``status``, newest submission first."""
        crafts = self._dao.query.filter(status=status).all().items
        return sorted(crafts, key=lambda c: c.created_at, reverse=True)
