"""Helpers for rendering aggregates as JSON documents."""


def iso(value):
    return value.isoformat() if value is not None else None


def document_header(aggregate) -> dict:
    """Identity and timestamp keys shared by every stored document."""
    return {
        "_id": str(aggregate.id),
        "createdAt": iso(aggregate.created_at),
        "updatedAt": iso(aggregate.updated_at),
    }
