"""Pytest configuration for lawmarket tests."""
import os

# Settings are cached on first import, so the environment must be in place
# before any lawmarket module is loaded.
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key-for-pytest-only")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from tests.fixtures import (  # noqa: E402
    InMemoryAccountRepository,
    InMemoryClientProfileRepository,
    InMemoryLawyerProfileRepository,
    InMemorySpecializationRepository,
    RecordingEventPublisher,
    make_account,
    make_catalog,
)


@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def specialization_repository(catalog):
    return InMemorySpecializationRepository(catalog)


@pytest.fixture
def account_repository():
    return InMemoryAccountRepository()


@pytest.fixture
def client_repository():
    return InMemoryClientProfileRepository()


@pytest.fixture
def lawyer_repository():
    return InMemoryLawyerProfileRepository()


@pytest.fixture
def publisher():
    return RecordingEventPublisher()


@pytest.fixture
def admin():
    return make_account(role="admin", display_name="Ada Admin", email="ada@lawmarket.com")


@pytest.fixture
def client_account():
    return make_account(role="client", display_name="Cleo Client", email="cleo@lawmarket.com")


@pytest.fixture
def lawyer_account():
    return make_account(role="lawyer", display_name="Lou Lawyer", email="lou@lawmarket.com")
