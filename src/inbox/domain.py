"""Inbox bounded context: contact-form messages and their triage by admins."""

import structlog
from protean.domain import Domain

inbox = Domain(name="inbox")

logger = structlog.get_logger(__name__)
