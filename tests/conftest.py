import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    # The app initializes the domain on import; the fixture builds the schema after it
    import app  # noqa: F401
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def run_around_tests(_ctx):
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from storefront.notifications.channel import reset_mailer

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    reset_mailer()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture
def mailer():
    from storefront.notifications.channel import set_mailer
    from storefront.notifications.channel.fake_email import FakeEmailAdapter

    adapter = FakeEmailAdapter()
    set_mailer(adapter)
    return adapter


@pytest.fixture
def make_product():
    from protean import current_domain

    from storefront.catalogue.product.management import AddProduct

    def _make(name="Kiaat Headboard", price=100.0, category="headboards", **details):
        command = AddProduct(name=name, price=price, category=category, **details)
        return current_domain.process(command, asynchronous=False)

    return _make


@pytest.fixture
def make_customer():
    from protean import current_domain

    from storefront.identity.account.registration import RegisterCustomer
    from storefront.identity.auth.passwords import hash_password

    def _make(name="Thandi Mokoena", email="thandi@example.com", password="s3cret-pass", **details):
        command = RegisterCustomer(name=name, email=email, password_hash=hash_password(password), **details)
        return current_domain.process(command, asynchronous=False)

    return _make


@pytest.fixture
def make_admin():
    from protean import current_domain

    from storefront.identity.account.registration import CreateAdmin
    from storefront.identity.auth.passwords import hash_password

    def _make(name="Store Admin", email="admin@example.com", password="admin-pass"):
        command = CreateAdmin(name=name, email=email, password_hash=hash_password(password))
        return current_domain.process(command, asynchronous=False)

    return _make


@pytest.fixture
def bearer():
    """Authorization headers for an account, signed with the store secret."""
    from storefront.identity.auth.tokens import issue_token

    def _headers(account_id, email="someone@example.com", role="customer"):
        return {"Authorization": f"Bearer {issue_token(str(account_id), email, role)}"}

    return _headers


@pytest.fixture
def api(storefront_bed):
    """TestClient over the storefront application."""
    from fastapi.testclient import TestClient

    from app import app

    return TestClient(app)
