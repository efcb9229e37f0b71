import pytest


@pytest.fixture(scope="session")
def _identity_domain():
    """The identity domain is initialized in ``pytest_sessionstart``."""
    from identity.domain import identity

    return identity


@pytest.fixture(autouse=True)
def run_around_tests(_identity_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _identity_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
