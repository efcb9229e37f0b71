import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def inbox_bed():
    from inbox.domain import inbox

    bed = DomainFixture(inbox)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(inbox_bed):
    with inbox_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()
