"""Identity bounded context: marketplace users, roles and bearer tokens."""

import structlog
from protean.domain import Domain

identity = Domain(name="identity")

logger = structlog.get_logger(__name__)
