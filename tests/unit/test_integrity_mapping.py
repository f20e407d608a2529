"""
Unit tests for mapping database constraint failures to domain errors.

PostgreSQL reports the violated constraint by name; the repositories must
tell a duplicate profile apart from a profile whose account is missing.
"""
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from lawmarket.modules.clients.domain.models.client_profile import ClientProfile
from lawmarket.modules.clients.domain.models.location import Location
from lawmarket.modules.clients.infrastructure.database.client_profile_repository_impl import (
    ClientProfileRepositoryImpl,
)
from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.infrastructure.database.lawyer_profile_repository_impl import (
    LawyerProfileRepositoryImpl,
)
from lawmarket.shared.core.exceptions import (
    AccountNotFoundError,
    BarNumberAlreadyRegisteredError,
    ClientProfileAlreadyExistsError,
    ConflictError,
    LawyerProfileAlreadyExistsError,
)
from lawmarket.shared.infrastructure.database.constraints import violates_foreign_key, violates_unique
from tests.fixtures import FAMILY_LAW_ID


def client_profile() -> ClientProfile:
    return ClientProfile.create(
        account_id="account-1",
        display_name="Cleo Client",
        location=Location.create("Nigeria", "Lagos"),
        specialization_ids=[FAMILY_LAW_ID],
    )


def lawyer_profile(with_bar_number=False) -> LawyerProfile:
    profile = LawyerProfile.create(
        account_id="account-1",
        first_name="Lou",
        last_name="Lawyer",
        email="lou@lawfirm.com",
        phone_number="+2348012345678",
        country="Nigeria",
    )
    if with_bar_number:
        profile.save_credentials(
            bar_number="NBA-12345",
            issue_date=date(2015, 6, 1),
            law_school="University of Lagos",
            graduation_year=2014,
        )
    return profile


def integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO ...", {}, Exception(message))


def pg_unique(table: str, column: str) -> IntegrityError:
    return integrity_error(
        f'duplicate key value violates unique constraint "uq_{table}_{column}"\n'
        f"DETAIL:  Key ({column})=(x) already exists."
    )


def pg_foreign_key(table: str, column: str, parent: str) -> IntegrityError:
    return integrity_error(
        f'insert or update on table "{table}" violates foreign key constraint "fk_{table}_{column}_{parent}"\n'
        f'DETAIL:  Key ({column})=(x) is not present in table "{parent}".'
    )


class TestConstraintClassification:
    def test_postgres_unique_is_matched_by_name(self):
        error = pg_unique("client_profiles", "account_id")

        assert violates_unique(error, "client_profiles", "account_id")
        assert not violates_foreign_key(error, "client_profiles", "account_id")

    def test_postgres_foreign_key_is_not_a_unique_violation(self):
        error = pg_foreign_key("client_profiles", "account_id", "accounts")

        assert violates_foreign_key(error, "client_profiles", "account_id")
        assert not violates_unique(error, "client_profiles", "account_id")

    def test_sqlite_messages(self):
        unique = integrity_error("UNIQUE constraint failed: lawyer_profiles.bar_number")
        foreign_key = integrity_error("FOREIGN KEY constraint failed")

        assert violates_unique(unique, "lawyer_profiles", "bar_number")
        assert not violates_unique(unique, "lawyer_profiles", "account_id")
        assert not violates_foreign_key(foreign_key, "lawyer_profiles", "account_id")


class TestClientProfileMapping:
    @pytest.fixture
    def repository(self):
        return ClientProfileRepositoryImpl(session=None)

    def test_duplicate_account(self, repository):
        error = repository._map_integrity_error(pg_unique("client_profiles", "account_id"), client_profile())

        assert isinstance(error, ClientProfileAlreadyExistsError)

    def test_missing_account(self, repository):
        error = repository._map_integrity_error(
            pg_foreign_key("client_profiles", "account_id", "accounts"), client_profile()
        )

        assert isinstance(error, AccountNotFoundError)
        assert error.status_code == 404

    def test_other_constraint(self, repository):
        error = repository._map_integrity_error(
            pg_foreign_key("client_specializations", "specialization_id", "specializations"),
            client_profile(),
        )

        assert type(error) is ConflictError


class TestLawyerProfileMapping:
    @pytest.fixture
    def repository(self):
        return LawyerProfileRepositoryImpl(session=None)

    def test_duplicate_bar_number(self, repository):
        profile = lawyer_profile(with_bar_number=True)

        error = repository._map_integrity_error(pg_unique("lawyer_profiles", "bar_number"), profile)

        assert isinstance(error, BarNumberAlreadyRegisteredError)

    def test_duplicate_account(self, repository):
        error = repository._map_integrity_error(pg_unique("lawyer_profiles", "account_id"), lawyer_profile())

        assert isinstance(error, LawyerProfileAlreadyExistsError)

    def test_missing_account(self, repository):
        error = repository._map_integrity_error(
            pg_foreign_key("lawyer_profiles", "account_id", "accounts"), lawyer_profile()
        )

        assert isinstance(error, AccountNotFoundError)
