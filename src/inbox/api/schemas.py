"""Pydantic request/response schemas for the Inbox API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContactRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Priya Nair",
                    "email": "priya@example.com",
                    "message": "Do you ship bamboo crafts to Kerala?",
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=150)
    email: str | None = Field(None, max_length=254)
    message: str | None = None


class ContactStatusRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str | None = None
    admin_notes: str | None = None


class ContactReceivedResponse(BaseModel):
    message: str
    contactId: str


class ContactResponse(BaseModel):
    message: str
    contact: dict


class StatusResponse(BaseModel):
    message: str
