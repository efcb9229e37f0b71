"""Catalogue domain API package."""

from catalogue.api.routes import craft_router

__all__ = ["craft_router"]
