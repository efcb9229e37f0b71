import os
import tempfile
from pathlib import Path
from types import SimpleNamespace
from uuid import uuid4

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config overlay and initializes the identity domain, which every
    context needs to resolve bearer tokens.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="craftbazaar-uploads-"))

    from identity.domain import identity

    identity.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def _reset_identity():
    """Accounts created through ``make_user`` live in the identity context."""
    yield

    from identity.domain import identity
    from protean import current_domain

    with identity.domain_context():
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def make_user():
    """Factory registering an account and returning it with a bearer token."""
    from identity.domain import identity
    from identity.user.registration import PromoteUser, RegisterUser
    from identity.user.tokens import issue_token
    from protean import current_domain

    def _make(role="user", email=None, username=None, password="handloom-123"):
        email = email or f"{uuid4().hex[:10]}@example.com"
        username = username or email.split("@")[0]

        with identity.domain_context():
            user_id = current_domain.process(
                RegisterUser(username=username, email=email, phone="9845012345", password=password),
                asynchronous=False,
            )
            if role == "admin":
                current_domain.process(PromoteUser(user_id=user_id), asynchronous=False)

        token = issue_token(user_id)
        return SimpleNamespace(
            id=user_id,
            email=email,
            username=username,
            password=password,
            token=token,
            headers={"Authorization": f"Bearer {token}"},
        )

    return _make


@pytest.fixture()
def buyer(make_user):
    return make_user(username="buyer")


@pytest.fixture()
def admin(make_user):
    return make_user(role="admin", username="moderator")
