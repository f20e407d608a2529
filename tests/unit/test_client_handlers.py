"""
Unit tests for client onboarding and profile handlers.

Onboarding is all-or-nothing: when any validation fails the repository
save is never reached and no event is published.
"""
import pytest
import pytest_asyncio

from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.modules.clients.application.commands.complete_onboarding import CompleteOnboardingCommand
from lawmarket.modules.clients.application.commands.update_client_profile import (
    AddClientSpecializationCommand,
    RemoveClientSpecializationCommand,
    UpdateClientProfileCommand,
)
from lawmarket.modules.clients.application.handlers.command_handlers import (
    AddClientSpecializationCommandHandler,
    CompleteOnboardingCommandHandler,
    RemoveClientSpecializationCommandHandler,
    UpdateClientProfileCommandHandler,
)
from lawmarket.modules.clients.application.handlers.query_handlers import (
    GetClientProfileQueryHandler,
    GetMyClientProfileQueryHandler,
    ListClientProfilesQueryHandler,
)
from lawmarket.modules.clients.application.queries.get_client_profile import (
    GetClientProfileQuery,
    GetMyClientProfileQuery,
    ListClientProfilesQuery,
)
from lawmarket.modules.clients.domain.services.client_domain_service import ClientDomainService
from lawmarket.shared.core.exceptions import (
    ClientProfileAlreadyExistsError,
    ClientProfileNotFoundError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from tests.fixtures import (
    CORPORATE_LAW_ID,
    CRIMINAL_LAW_ID,
    FAMILY_LAW_ID,
    IMMIGRATION_LAW_ID,
    UNKNOWN_SPECIALIZATION_ID,
)


def onboarding_command(account_id="account-1", **overrides) -> CompleteOnboardingCommand:
    values = dict(
        account_id=account_id,
        display_name="Cleo Client",
        email_verified=True,
        phone_number="+2348012345678",
        country="Nigeria",
        state="Lagos",
        company="Acme Ltd",
        specialization_ids=[FAMILY_LAW_ID, CRIMINAL_LAW_ID],
    )
    values.update(overrides)
    return CompleteOnboardingCommand(**values)


@pytest.fixture
def domain_service(client_repository, specialization_repository):
    return ClientDomainService(client_repository, specialization_repository)


@pytest.fixture
def onboarding_handler(client_repository, domain_service, publisher):
    return CompleteOnboardingCommandHandler(client_repository, domain_service, publisher)


@pytest_asyncio.fixture
async def onboarded(onboarding_handler):
    await onboarding_handler.handle(onboarding_command())
    return "account-1"


class TestCompleteOnboarding:
    @pytest.mark.asyncio
    async def test_successful_onboarding(self, onboarding_handler, client_repository, publisher):
        result = await onboarding_handler.handle(onboarding_command())

        assert result.account_id == "account-1"
        assert result.specialization_count == 2
        assert result.onboarding_completed is True

        stored = await client_repository.find_by_account_id("account-1")
        assert stored.id == result.client_id
        assert stored.location.state == "Lagos"
        assert publisher.event_types == ["client.profile_created", "client.onboarding_completed"]

    @pytest.mark.asyncio
    async def test_unverified_email_is_unauthorized(self, onboarding_handler, client_repository, publisher):
        with pytest.raises(UnauthorizedError, match="Email verification required"):
            await onboarding_handler.handle(onboarding_command(email_verified=False))

        assert client_repository.save_calls == 0
        assert publisher.events == []

    @pytest.mark.asyncio
    async def test_second_onboarding_conflicts(self, onboarding_handler, client_repository):
        await onboarding_handler.handle(onboarding_command())

        with pytest.raises(ClientProfileAlreadyExistsError) as exc_info:
            await onboarding_handler.handle(onboarding_command())

        assert exc_info.value.status_code == 409
        assert client_repository.save_calls == 1
        assert len(client_repository) == 1

    @pytest.mark.asyncio
    async def test_unknown_specialization_ids_are_named(self, onboarding_handler, client_repository, publisher):
        command = onboarding_command(specialization_ids=[FAMILY_LAW_ID, UNKNOWN_SPECIALIZATION_ID])

        with pytest.raises(ValidationError) as exc_info:
            await onboarding_handler.handle(command)

        assert exc_info.value.invalid_ids == [UNKNOWN_SPECIALIZATION_ID]
        assert client_repository.save_calls == 0
        assert publisher.events == []

    @pytest.mark.asyncio
    async def test_too_many_specializations(self, onboarding_handler, client_repository):
        command = onboarding_command(
            specialization_ids=[FAMILY_LAW_ID, CRIMINAL_LAW_ID, CORPORATE_LAW_ID, IMMIGRATION_LAW_ID]
        )

        with pytest.raises(ValidationError, match="Maximum 3 specializations allowed"):
            await onboarding_handler.handle(command)
        assert client_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_no_specializations(self, onboarding_handler, client_repository):
        with pytest.raises(ValidationError, match="At least one specialization is required"):
            await onboarding_handler.handle(onboarding_command(specialization_ids=[]))
        assert client_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_blank_state(self, onboarding_handler, client_repository):
        with pytest.raises(ValidationError, match="State is required"):
            await onboarding_handler.handle(onboarding_command(state="  "))
        assert client_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_duplicate_ids_count_once(self, onboarding_handler):
        result = await onboarding_handler.handle(
            onboarding_command(specialization_ids=[FAMILY_LAW_ID, FAMILY_LAW_ID, FAMILY_LAW_ID, CRIMINAL_LAW_ID])
        )
        assert result.specialization_count == 2


class TestClientProfileCommands:
    @pytest.mark.asyncio
    async def test_update_profile_and_location(self, onboarded, client_repository, publisher):
        handler = UpdateClientProfileCommandHandler(client_repository, publisher)

        profile = await handler.handle(
            UpdateClientProfileCommand(account_id=onboarded, company="Globex", country="Ghana", state="Accra")
        )

        assert profile.company == "Globex"
        assert str(profile.location) == "Accra, Ghana"
        stored = await client_repository.find_by_account_id(onboarded)
        assert stored.location.country == "Ghana"

    @pytest.mark.asyncio
    async def test_country_without_state_is_rejected(self, onboarded, client_repository, publisher):
        handler = UpdateClientProfileCommandHandler(client_repository, publisher)

        with pytest.raises(ValidationError, match="Both country and state"):
            await handler.handle(UpdateClientProfileCommand(account_id=onboarded, country="Ghana"))
        assert client_repository.update_calls == 0

    @pytest.mark.asyncio
    async def test_update_without_profile(self, client_repository, publisher):
        handler = UpdateClientProfileCommandHandler(client_repository, publisher)

        with pytest.raises(ClientProfileNotFoundError, match="Complete onboarding first"):
            await handler.handle(UpdateClientProfileCommand(account_id="nobody", company="Globex"))

    @pytest.mark.asyncio
    async def test_add_specialization(self, onboarded, client_repository, domain_service, publisher):
        handler = AddClientSpecializationCommandHandler(client_repository, domain_service, publisher)

        profile = await handler.handle(
            AddClientSpecializationCommand(account_id=onboarded, specialization_id=CORPORATE_LAW_ID)
        )

        assert profile.specialization_ids == [FAMILY_LAW_ID, CRIMINAL_LAW_ID, CORPORATE_LAW_ID]

    @pytest.mark.asyncio
    async def test_add_unknown_specialization(self, onboarded, client_repository, domain_service, publisher):
        handler = AddClientSpecializationCommandHandler(client_repository, domain_service, publisher)

        with pytest.raises(ValidationError) as exc_info:
            await handler.handle(
                AddClientSpecializationCommand(account_id=onboarded, specialization_id=UNKNOWN_SPECIALIZATION_ID)
            )
        assert exc_info.value.invalid_ids == [UNKNOWN_SPECIALIZATION_ID]
        assert client_repository.update_calls == 0

    @pytest.mark.asyncio
    async def test_remove_specialization(self, onboarded, client_repository, publisher):
        handler = RemoveClientSpecializationCommandHandler(client_repository, publisher)

        profile = await handler.handle(
            RemoveClientSpecializationCommand(account_id=onboarded, specialization_id=FAMILY_LAW_ID)
        )

        assert profile.specialization_ids == [CRIMINAL_LAW_ID]
        assert (await client_repository.find_by_account_id(onboarded)).specialization_ids == [CRIMINAL_LAW_ID]


class TestClientProfileQueries:
    @pytest.mark.asyncio
    async def test_get_my_profile(self, onboarded, client_repository):
        profile = await GetMyClientProfileQueryHandler(client_repository).handle(
            GetMyClientProfileQuery(account_id=onboarded)
        )
        assert profile.onboarding_completed is True

    @pytest.mark.asyncio
    async def test_get_my_profile_before_onboarding(self, client_repository):
        with pytest.raises(ClientProfileNotFoundError):
            await GetMyClientProfileQueryHandler(client_repository).handle(GetMyClientProfileQuery(account_id="x"))

    @pytest.mark.asyncio
    async def test_admin_reads_any_profile(self, onboarded, client_repository, admin):
        mine = await client_repository.find_by_account_id(onboarded)
        handler = GetClientProfileQueryHandler(client_repository, AccountDomainService())

        profile = await handler.handle(admin, GetClientProfileQuery(profile_id=mine.id))

        assert profile.id == mine.id

    @pytest.mark.asyncio
    async def test_admin_reads_unknown_profile(self, client_repository, admin):
        handler = GetClientProfileQueryHandler(client_repository, AccountDomainService())

        with pytest.raises(ClientProfileNotFoundError, match="Client not found"):
            await handler.handle(admin, GetClientProfileQuery(profile_id="missing"))

    @pytest.mark.asyncio
    async def test_list_requires_admin(self, onboarded, client_repository, admin, client_account):
        handler = ListClientProfilesQueryHandler(client_repository, AccountDomainService())

        assert len(await handler.handle(admin, ListClientProfilesQuery())) == 1
        with pytest.raises(ForbiddenError):
            await handler.handle(client_account, ListClientProfilesQuery())
