"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the marketplace's validation
rules and use the exact wire names the API expects.
"""

import random
import uuid

from faker import Faker

fake = Faker("en_IN")

REGIONS = ["Rajasthan", "Odisha", "West Bengal", "Madhya Pradesh", "Kutch", "Kashmir", "Assam"]
CRAFT_KINDS = ["Gond painting", "Dokra horse", "Pattachitra scroll", "Blue pottery vase", "Kantha stole", "Bidri box"]
PAYMENT_METHODS = ["credit_card", "debit_card", "upi", "net_banking", "cod"]

# Smallest valid JPEG header; the server stores bytes without inspecting them
_TINY_JPEG = bytes.fromhex("ffd8ffe000104a46494600010100000100010000ffd9")


# ---------- Identity ----------


def valid_email() -> str:
    """Emails unique per run: the local part carries a short random suffix."""
    return f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:6]}@example.com"


def valid_phone() -> str:
    return f"9{random.randint(100000000, 999999999)}"


def signup_data() -> dict:
    """SignupRequest payload."""
    return {
        "username": fake.user_name()[:40],
        "email": valid_email(),
        "phone": valid_phone(),
        "password": fake.password(length=12),
    }


# ---------- Catalogue ----------


def display_price() -> str:
    """A price the way sellers type it."""
    amount = random.randint(150, 4500)
    return random.choice([f"${amount // 80}", f"Rs. {amount:,}", f"₹{amount}"])


def craft_form() -> dict:
    """Multipart form fields for POST /crafts/sell."""
    artist = fake.name()
    return {
        "sellerFullName": artist,
        "sellerEmail": valid_email(),
        "sellerPhone": valid_phone(),
        "itemName": random.choice(CRAFT_KINDS),
        "description": fake.paragraph(nb_sentences=2),
        "price": display_price(),
        "region": random.choice(REGIONS),
        "artistName": artist,
    }


def craft_image() -> dict:
    """The ``files`` argument for the craft image upload."""
    return {"image": (f"{uuid.uuid4().hex[:8]}.jpg", _TINY_JPEG, "image/jpeg")}


# ---------- Ordering ----------


def cart_line(craft: dict) -> dict:
    """AddToCartRequest payload built from a craft document."""
    return {
        "craftId": craft["_id"],
        "craftTitle": craft["itemName"],
        "craftPrice": craft["price"],
        "craftImage": craft["imageUrl"],
    }


def shipping_address() -> dict:
    return {
        "fullName": fake.name()[:150],
        "address": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state()[:100],
        "zipCode": fake.postcode()[:20],
        "country": "India",
        "phone": valid_phone(),
    }


def checkout_data() -> dict:
    """CreateOrderRequest payload."""
    return {
        "shippingAddress": shipping_address(),
        "paymentMethod": random.choice(PAYMENT_METHODS),
        "notes": random.choice(["", "Please gift wrap", "Call before delivery"]),
    }


# ---------- Inbox ----------


def contact_data() -> dict:
    """ContactRequest payload."""
    return {
        "name": fake.name()[:150],
        "email": valid_email(),
        "message": fake.paragraph(nb_sentences=3),
    }
