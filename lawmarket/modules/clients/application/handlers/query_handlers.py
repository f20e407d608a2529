# 📄 File: lawmarket/modules/clients/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Looks up client profiles for their owners and, for admins, any or all of them.
# 🧪 Purpose (Technical Summary):
# Read-side handlers; admin queries run the account admin predicate first.
# 🔗 Dependencies:
# ClientProfileRepository, AccountDomainService
# 🔄 Connected Modules / Calls From:
# clients router

from typing import List

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.modules.clients.application.queries.get_client_profile import (
    GetClientProfileQuery,
    GetMyClientProfileQuery,
    ListClientProfilesQuery,
)
from lawmarket.modules.clients.domain.models.client_profile import ClientProfile
from lawmarket.modules.clients.domain.repositories.client_profile_repository import ClientProfileRepository
from lawmarket.shared.core.exceptions import ClientProfileNotFoundError


class GetMyClientProfileQueryHandler:
    def __init__(self, client_repository: ClientProfileRepository):
        self._client_repository = client_repository

    async def handle(self, query: GetMyClientProfileQuery) -> ClientProfile:
        profile = await self._client_repository.find_by_account_id(query.account_id)
        if profile is None:
            raise ClientProfileNotFoundError()
        return profile


class GetClientProfileQueryHandler:
    def __init__(self, client_repository: ClientProfileRepository, account_domain_service: AccountDomainService):
        self._client_repository = client_repository
        self._account_domain_service = account_domain_service

    async def handle(self, actor: Account, query: GetClientProfileQuery) -> ClientProfile:
        self._account_domain_service.ensure_can_perform_admin_action(actor)
        profile = await self._client_repository.find_by_id(query.profile_id)
        if profile is None:
            raise ClientProfileNotFoundError("Client not found", resource_id=query.profile_id)
        return profile


class ListClientProfilesQueryHandler:
    def __init__(self, client_repository: ClientProfileRepository, account_domain_service: AccountDomainService):
        self._client_repository = client_repository
        self._account_domain_service = account_domain_service

    async def handle(self, actor: Account, query: ListClientProfilesQuery) -> List[ClientProfile]:
        self._account_domain_service.ensure_can_perform_admin_action(actor)
        return await self._client_repository.find_all()
