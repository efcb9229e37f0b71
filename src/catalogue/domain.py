"""Catalogue bounded context: seller craft listings and their moderation."""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
