# 📄 File: lawmarket/modules/lawyers/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Walks a lawyer through the application steps, saving each step only when it is valid and
# telling the admins once the application is sent.
#
# 🧪 Purpose (Technical Summary):
# Command handlers for the lawyer onboarding state machine. Each handler loads (or creates) the
# LawyerProfile, runs cross-aggregate checks through LawyerDomainService, applies the
# transition on the aggregate, persists atomically and then publishes the pulled events.
#
# 🔗 Dependencies:
# LawyerProfileRepository, LawyerDomainService, EventPublisher, lawyer value objects
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers.presentation.api.v1.lawyers

__all__ = [
    "StartLawyerOnboardingCommandHandler",
    "SaveLawyerCredentialsCommandHandler",
    "AddLawyerDocumentsCommandHandler",
    "SaveLawyerSpecializationsCommandHandler",
    "SubmitLawyerApplicationCommandHandler",
]

import logging
from typing import List, Sequence

from lawmarket.modules.lawyers.application.commands.save_lawyer_credentials import (
    AddLawyerDocumentsCommand,
    DocumentInput,
    SaveLawyerCredentialsCommand,
)
from lawmarket.modules.lawyers.application.commands.save_lawyer_specializations import (
    SaveLawyerSpecializationsCommand,
)
from lawmarket.modules.lawyers.application.commands.start_lawyer_onboarding import StartLawyerOnboardingCommand
from lawmarket.modules.lawyers.application.commands.submit_lawyer_application import SubmitLawyerApplicationCommand
from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.models.value_objects import LawyerDocument
from lawmarket.modules.lawyers.domain.repositories.lawyer_profile_repository import LawyerProfileRepository
from lawmarket.modules.lawyers.domain.services.lawyer_domain_service import LawyerDomainService
from lawmarket.shared.core.exceptions import LawyerProfileNotFoundError, UnauthorizedError
from lawmarket.shared.domain.entity import pull_events
from lawmarket.shared.events.publisher import EventPublisher

logger = logging.getLogger(__name__)


async def _load_own_profile(repository: LawyerProfileRepository, account_id: str) -> LawyerProfile:
    profile = await repository.find_by_account_id(account_id)
    if profile is None:
        raise LawyerProfileNotFoundError()
    return profile


def _build_documents(documents: Sequence[DocumentInput]) -> List[LawyerDocument]:
    return [
        LawyerDocument.create(
            document_type=doc.document_type,
            url=doc.url,
            public_id=doc.public_id,
            original_name=doc.original_name,
            file_size=doc.file_size,
            mime_type=doc.mime_type,
        )
        for doc in documents
    ]


class StartLawyerOnboardingCommandHandler:
    """
    Opens a lawyer application at the basic_info step.
    """

    def __init__(
        self,
        lawyer_repository: LawyerProfileRepository,
        domain_service: LawyerDomainService,
        event_publisher: EventPublisher,
    ):
        self._lawyer_repository = lawyer_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, command: StartLawyerOnboardingCommand) -> LawyerProfile:
        if not command.email_verified:
            raise UnauthorizedError("Email verification required before onboarding")

        await self._domain_service.ensure_lawyer_does_not_exist(command.account_id)

        profile = LawyerProfile.create(
            account_id=command.account_id,
            first_name=command.first_name,
            middle_name=command.middle_name,
            last_name=command.last_name,
            email=command.email,
            phone_number=command.phone_number,
            country=command.country,
        )

        saved = await self._lawyer_repository.save(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        logger.info(f"Lawyer onboarding started: profile {saved.id} for account {saved.account_id}")
        return saved


class SaveLawyerCredentialsCommandHandler:
    def __init__(
        self,
        lawyer_repository: LawyerProfileRepository,
        domain_service: LawyerDomainService,
        event_publisher: EventPublisher,
    ):
        self._lawyer_repository = lawyer_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, command: SaveLawyerCredentialsCommand) -> LawyerProfile:
        profile = await _load_own_profile(self._lawyer_repository, command.account_id)
        documents = _build_documents(command.documents)

        # A repeated save must fail on the step, not on its own bar number
        profile.ensure_can_save_credentials()
        await self._domain_service.ensure_bar_number_available(command.bar_number)
        profile.save_credentials(
            bar_number=command.bar_number,
            issue_date=command.issue_date,
            law_school=command.law_school,
            graduation_year=command.graduation_year,
            bar_association=command.bar_association,
            expiry_date=command.expiry_date,
            current_firm=command.current_firm,
            documents=documents,
        )

        saved = await self._lawyer_repository.update(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        logger.info(f"Lawyer credentials saved for profile {profile.id}")
        return saved


class AddLawyerDocumentsCommandHandler:
    def __init__(self, lawyer_repository: LawyerProfileRepository, event_publisher: EventPublisher):
        self._lawyer_repository = lawyer_repository
        self._event_publisher = event_publisher

    async def handle(self, command: AddLawyerDocumentsCommand) -> LawyerProfile:
        profile = await _load_own_profile(self._lawyer_repository, command.account_id)
        documents = _build_documents(command.documents)
        profile.attach_documents(documents)

        await self._lawyer_repository.save_documents(profile.id, documents)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        logger.info(f"Attached {len(documents)} document(s) to lawyer profile {profile.id}")
        return profile


class SaveLawyerSpecializationsCommandHandler:
    def __init__(
        self,
        lawyer_repository: LawyerProfileRepository,
        domain_service: LawyerDomainService,
        event_publisher: EventPublisher,
    ):
        self._lawyer_repository = lawyer_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, command: SaveLawyerSpecializationsCommand) -> LawyerProfile:
        profile = await _load_own_profile(self._lawyer_repository, command.account_id)
        await self._domain_service.validate_specializations(command.all_specialization_ids)

        profile.save_specializations(
            primary=[(item.specialization_id, item.years_of_experience) for item in command.primary],
            secondary=[(item.specialization_id, item.years_of_experience) for item in command.secondary],
            language_ids=command.language_ids,
        )

        saved = await self._lawyer_repository.update(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        return saved


class SubmitLawyerApplicationCommandHandler:
    def __init__(self, lawyer_repository: LawyerProfileRepository, event_publisher: EventPublisher):
        self._lawyer_repository = lawyer_repository
        self._event_publisher = event_publisher

    async def handle(self, command: SubmitLawyerApplicationCommand) -> LawyerProfile:
        profile = await _load_own_profile(self._lawyer_repository, command.account_id)
        profile.submit_for_review()

        saved = await self._lawyer_repository.update(profile)
        await self._event_publisher.publish_all(pull_events(profile.meta))
        logger.info(f"Lawyer application submitted for review: profile {profile.id}")
        return saved
