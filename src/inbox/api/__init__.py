"""Inbox domain API package."""

from inbox.api.routes import contact_router

__all__ = ["contact_router"]
