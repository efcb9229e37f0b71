"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from the
internal Protean commands. Keys are camelCase on the wire. Fields the
domain treats as required are optional here so that a missing value is
reported as a domain validation failure rather than a schema error.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(_CamelModel):
    full_name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    phone: str | None = None


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "craftId": "5b0a7c9e-1f0e-4c55-8f0c-6f7d3c1e2a10",
                    "craftTitle": "Gond painting",
                    "craftPrice": "$45",
                    "craftImage": "/uploads/1718000000000-gond.jpg",
                }
            ]
        },
    )

    craft_id: str | None = None
    craft_title: str | None = None
    craft_price: str | None = None
    craft_image: str | None = None
    quantity: int = 1


# ---------------------------------------------------------------------------
# Checkout Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "shippingAddress": {
                        "fullName": "Arjun Rao",
                        "address": "14 MG Road",
                        "city": "Bengaluru",
                        "state": "Karnataka",
                        "zipCode": "560001",
                        "country": "India",
                        "phone": "9845012345",
                    },
                    "paymentMethod": "upi",
                    "notes": "Please gift wrap",
                }
            ]
        },
    )

    shipping_address: AddressSchema | None = None
    payment_method: str | None = None
    notes: str | None = None


class UpdateOrderStatusRequest(_CamelModel):
    order_status: str | None = None
    payment_status: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartResponse(BaseModel):
    message: str
    cart: dict


class OrderResponse(BaseModel):
    message: str
    order: dict


class CreateOrderResponse(OrderResponse):
    orderNumber: str
