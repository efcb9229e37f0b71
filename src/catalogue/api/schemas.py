"""Pydantic response schemas for the Catalogue API.

Listing submissions arrive as multipart form fields, so there is no request
model; see ``routes.sell_craft``.
"""

from pydantic import BaseModel


class CraftResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "Craft submitted successfully",
                    "craft": {
                        "_id": "5b0a7c9e-1f0e-4c55-8f0c-6f7d3c1e2a10",
                        "sellerFullName": "Lakshmi Devi",
                        "sellerEmail": "lakshmi@example.com",
                        "sellerPhone": "9845012345",
                        "itemName": "Gond painting",
                        "description": "Hand-painted on canvas with natural pigments",
                        "price": "$45",
                        "region": "Madhya Pradesh",
                        "artistName": "Lakshmi Devi",
                        "imageUrl": "/uploads/1718000000000-gond.jpg",
                        "status": "pending",
                        "sellerId": "0c2f7d3e-9a1b-4d8e-a1f2-3b4c5d6e7f80",
                    },
                }
            ]
        }
    }

    message: str
    craft: dict
