# 📄 File: lawmarket/modules/clients/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the client endpoints the repositories, rule checkers and handlers they need.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency factories for the clients module; all share the request-scoped session.
# 🔗 Dependencies:
# FastAPI Depends, ClientProfileRepositoryImpl, SpecializationRepositoryImpl
# 🔄 Connected Modules / Calls From:
# onboarding and clients routers; tests override get_client_repository

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.modules.accounts.presentation.dependencies import get_account_domain_service
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
from lawmarket.modules.clients.domain.repositories.client_profile_repository import ClientProfileRepository
from lawmarket.modules.clients.domain.services.client_domain_service import ClientDomainService
from lawmarket.modules.clients.infrastructure.database.client_profile_repository_impl import (
    ClientProfileRepositoryImpl,
)
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.modules.specializations.presentation.dependencies import get_specialization_repository
from lawmarket.shared.events.publisher import EventPublisher, get_event_publisher
from lawmarket.shared.infrastructure.database.session import get_db_session


def get_client_repository(session: AsyncSession = Depends(get_db_session)) -> ClientProfileRepository:
    return ClientProfileRepositoryImpl(session)


def get_client_domain_service(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    specialization_repository: SpecializationRepository = Depends(get_specialization_repository),
) -> ClientDomainService:
    return ClientDomainService(client_repository, specialization_repository)


def get_complete_onboarding_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    domain_service: ClientDomainService = Depends(get_client_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> CompleteOnboardingCommandHandler:
    return CompleteOnboardingCommandHandler(client_repository, domain_service, event_publisher)


def get_update_client_profile_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> UpdateClientProfileCommandHandler:
    return UpdateClientProfileCommandHandler(client_repository, event_publisher)


def get_add_client_specialization_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    domain_service: ClientDomainService = Depends(get_client_domain_service),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> AddClientSpecializationCommandHandler:
    return AddClientSpecializationCommandHandler(client_repository, domain_service, event_publisher)


def get_remove_client_specialization_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    event_publisher: EventPublisher = Depends(get_event_publisher),
) -> RemoveClientSpecializationCommandHandler:
    return RemoveClientSpecializationCommandHandler(client_repository, event_publisher)


def get_my_client_profile_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
) -> GetMyClientProfileQueryHandler:
    return GetMyClientProfileQueryHandler(client_repository)


def get_client_profile_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    account_domain_service: AccountDomainService = Depends(get_account_domain_service),
) -> GetClientProfileQueryHandler:
    return GetClientProfileQueryHandler(client_repository, account_domain_service)


def get_list_client_profiles_handler(
    client_repository: ClientProfileRepository = Depends(get_client_repository),
    account_domain_service: AccountDomainService = Depends(get_account_domain_service),
) -> ListClientProfilesQueryHandler:
    return ListClientProfilesQueryHandler(client_repository, account_domain_service)
