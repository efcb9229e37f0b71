import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def gond_painting():
    return {
        "craft_id": "craft-gond",
        "title": "Gond painting",
        "price": "$30",
        "image": "/uploads/gond.jpg",
    }


@pytest.fixture()
def dokra_horse():
    return {
        "craft_id": "craft-dokra",
        "title": "Dokra brass horse",
        "price": "$45",
        "image": "/uploads/dokra.jpg",
    }


@pytest.fixture()
def shipping_address():
    return {
        "full_name": "Arjun Rao",
        "address": "14 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "zip_code": "560001",
        "country": "India",
        "phone": "9845012345",
    }
