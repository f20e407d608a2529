# 📄 File: lawmarket/modules/clients/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out client sign-up and later profile edits, checking every rule before anything is
# saved so a failed attempt leaves no half-made profile behind.
#
# 🧪 Purpose (Technical Summary):
# Command handlers for client onboarding, profile updates and specialization add/remove. Each
# loads or builds the ClientProfile aggregate, validates through ClientDomainService, persists
# through ClientProfileRepository and publishes pulled events only after the write returned.
#
# 🔗 Dependencies:
# ClientProfileRepository, ClientDomainService, EventPublisher, Location value object
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients.presentation.api.v1 (onboarding and clients routers)

__all__ = [
    "CompleteOnboardingCommandHandler",
    "UpdateClientProfileCommandHandler",
    "AddClientSpecializationCommandHandler",
    "RemoveClientSpecializationCommandHandler",
]

import logging

from lawmarket.modules.clients.application.commands.complete_onboarding import (
    CompleteOnboardingCommand,
    CompleteOnboardingResult,
)
from lawmarket.modules.clients.application.commands.update_client_profile import (
    AddClientSpecializationCommand,
    RemoveClientSpecializationCommand,
    UpdateClientProfileCommand,
)
from lawmarket.modules.clients.domain.models.client_profile import ClientProfile
from lawmarket.modules.clients.domain.models.location import Location
from lawmarket.modules.clients.domain.repositories.client_profile_repository import ClientProfileRepository
from lawmarket.modules.clients.domain.services.client_domain_service import ClientDomainService
from lawmarket.shared.core.exceptions import (
    ClientProfileNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from lawmarket.shared.domain.entity import pull_events
from lawmarket.shared.events.publisher import EventPublisher

logger = logging.getLogger(__name__)


async def _load_own_profile(repository: ClientProfileRepository, account_id: str) -> ClientProfile:
    profile = await repository.find_by_account_id(account_id)
    if profile is None:
        raise ClientProfileNotFoundError()
    return profile


class CompleteOnboardingCommandHandler:
    """
    Creates the client profile and completes onboarding in one attempt.

    Validation order: verified email, no existing profile, catalog ids,
    location, aggregate construction, completion. Nothing is written
    unless every step passes.
    """

    def __init__(
        self,
        client_repository: ClientProfileRepository,
        domain_service: ClientDomainService,
        event_publisher: EventPublisher,
    ):
        self._client_repository = client_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, command: CompleteOnboardingCommand) -> CompleteOnboardingResult:
        logger.info(f"Starting client onboarding for account: {command.account_id}")

        if not command.email_verified:
            raise UnauthorizedError("Email verification required before onboarding")

        await self._domain_service.ensure_client_does_not_exist(command.account_id)
        await self._domain_service.validate_specializations(command.specialization_ids)

        location = Location.create(command.country, command.state)
        profile = ClientProfile.create(
            account_id=command.account_id,
            display_name=command.display_name,
            location=location,
            specialization_ids=command.specialization_ids,
            phone_number=command.phone_number,
            company=command.company,
        )
        profile.complete_onboarding()

        saved = await self._client_repository.save(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))

        logger.info(f"Client onboarding completed: profile {saved.id} for account {saved.account_id}")
        return CompleteOnboardingResult(
            client_id=saved.id,
            account_id=saved.account_id,
            specialization_count=saved.specialization_count,
            onboarding_completed=saved.onboarding_completed,
        )


class UpdateClientProfileCommandHandler:
    def __init__(self, client_repository: ClientProfileRepository, event_publisher: EventPublisher):
        self._client_repository = client_repository
        self._event_publisher = event_publisher

    async def handle(self, command: UpdateClientProfileCommand) -> ClientProfile:
        if (command.country is None) != (command.state is None):
            raise ValidationError("Both country and state must be provided together", field="location")

        profile = await _load_own_profile(self._client_repository, command.account_id)
        profile.update_profile(
            display_name=command.display_name,
            phone_number=command.phone_number,
            company=command.company,
        )
        if command.country is not None:
            profile.relocate(Location.create(command.country, command.state))

        saved = await self._client_repository.update(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        logger.info(f"Updated client profile {profile.id}")
        return saved


class AddClientSpecializationCommandHandler:
    def __init__(
        self,
        client_repository: ClientProfileRepository,
        domain_service: ClientDomainService,
        event_publisher: EventPublisher,
    ):
        self._client_repository = client_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, command: AddClientSpecializationCommand) -> ClientProfile:
        profile = await _load_own_profile(self._client_repository, command.account_id)
        await self._domain_service.validate_specializations([command.specialization_id])
        profile.add_specialization(command.specialization_id)

        saved = await self._client_repository.update(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        return saved


class RemoveClientSpecializationCommandHandler:
    def __init__(self, client_repository: ClientProfileRepository, event_publisher: EventPublisher):
        self._client_repository = client_repository
        self._event_publisher = event_publisher

    async def handle(self, command: RemoveClientSpecializationCommand) -> ClientProfile:
        profile = await _load_own_profile(self._client_repository, command.account_id)
        profile.remove_specialization(command.specialization_id)

        saved = await self._client_repository.update(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        return saved
