# 📄 File: lawmarket/modules/lawyers/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the lawyer endpoints the repositories, rule checkers and handlers they need.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency factories for the lawyers module.
# 🔗 Dependencies:
# FastAPI Depends, LawyerProfileRepositoryImpl, specialization repository factory
# 🔄 Connected Modules / Calls From:
# lawyers router; tests override get_lawyer_repository

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.lawyers.application.handlers.command_handlers import (
    AddLawyerDocumentsCommandHandler,
    SaveLawyerCredentialsCommandHandler,
    SaveLawyerSpecializationsCommandHandler,
    StartLawyerOnboardingCommandHandler,
    SubmitLawyerApplicationCommandHandler,
)
from lawmarket.modules.lawyers.application.handlers.query_handlers import GetMyLawyerProfileQueryHandler
from lawmarket.modules.lawyers.domain.repositories.lawyer_profile_repository import LawyerProfileRepository
from lawmarket.modules.lawyers.domain.services.lawyer_domain_service import LawyerDomainService
from lawmarket.modules.lawyers.infrastructure.database.lawyer_profile_repository_impl import (
    LawyerProfileRepositoryImpl,
)
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.modules.specializations.presentation.dependencies import get_specialization_repository
from lawmarket.shared.events.publisher import EventPublisher, get_event_publisher
from lawmarket.shared.infrastructure.database.session import get_db_session


def get_lawyer_repository(session: AsyncSession = Depends(get_db_session)) -> LawyerProfileRepository:
    return LawyerProfileRepositoryImpl(session)


def get_lawyer_domain_service(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
    specialization_repository: SpecializationRepository = Depends(get_specialization_repository),
) -> LawyerDomainService:
    return LawyerDomainService(lawyer_repository, specialization_repository)


def get_start_lawyer_onboarding_handler(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
    domain_service: LawyerDomainService = Depends(get_lawyer_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> StartLawyerOnboardingCommandHandler:
    return StartLawyerOnboardingCommandHandler(lawyer_repository, domain_service, event_publisher)


def get_save_lawyer_credentials_handler(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
    domain_service: LawyerDomainService = Depends(get_lawyer_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> SaveLawyerCredentialsCommandHandler:
    return SaveLawyerCredentialsCommandHandler(lawyer_repository, domain_service, event_publisher)


def get_add_lawyer_documents_handler(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> AddLawyerDocumentsCommandHandler:
    return AddLawyerDocumentsCommandHandler(lawyer_repository, event_publisher)


def get_save_lawyer_specializations_handler(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
    domain_service: LawyerDomainService = Depends(get_lawyer_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> SaveLawyerSpecializationsCommandHandler:
    return SaveLawyerSpecializationsCommandHandler(lawyer_repository, domain_service, event_publisher)


def get_submit_lawyer_application_handler(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> SubmitLawyerApplicationCommandHandler:
    return SubmitLawyerApplicationCommandHandler(lawyer_repository, event_publisher)


def get_my_lawyer_profile_handler(
    lawyer_repository: LawyerProfileRepository = Depends(get_lawyer_repository),
) -> GetMyLawyerProfileQueryHandler:
    return GetMyLawyerProfileQueryHandler(lawyer_repository)
