import os

import pytest


@pytest.fixture(scope="session")
def _catalogue_domain(request):
    """Initialize the catalogue domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(autouse=True)
def run_around_tests(_catalogue_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _catalogue_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def listing():
    """A complete set of listing fields, as a seller would fill the form."""
    return {
        "seller_full_name": "Lakshmi Devi",
        "seller_email": "lakshmi@example.com",
        "seller_phone": "9845012345",
        "item_name": "Gond painting",
        "description": "Hand-painted on canvas with natural pigments",
        "price": "$45",
        "region": "Madhya Pradesh",
        "artist_name": "Lakshmi Devi",
    }
