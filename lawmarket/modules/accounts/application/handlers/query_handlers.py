# 📄 File: lawmarket/modules/accounts/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers questions about accounts: "who am I?" and, for admins, "show me users matching ...".
# 🧪 Purpose (Technical Summary):
# Read-side handlers for account lookup and the paginated, filterable admin listing.
# 🔗 Dependencies:
# AccountRepository, AccountDomainService, Role value object
# 🔄 Connected Modules / Calls From:
# user and admin routers

import logging

from lawmarket.modules.accounts.application.queries.get_account import GetAccountQuery, ListAccountsQuery
from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import Role
from lawmarket.modules.accounts.domain.repositories.account_repository import (
    AccountListFilter,
    AccountPage,
    AccountRepository,
)
from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.shared.core.exceptions import AccountNotFoundError, ValidationError

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class GetAccountQueryHandler:
    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def handle(self, query: GetAccountQuery) -> Account:
        account = await self._account_repository.find_by_id(query.account_id)
        if account is None:
            raise AccountNotFoundError(query.account_id)
        return account


class ListAccountsQueryHandler:
    """
    Admin-only account listing.
    """

    def __init__(self, account_repository: AccountRepository, domain_service: AccountDomainService):
        self._account_repository = account_repository
        self._domain_service = domain_service

    async def handle(self, actor: Account, query: ListAccountsQuery) -> AccountPage:
        self._domain_service.ensure_can_perform_admin_action(actor)

        if query.page < 1:
            raise ValidationError("Page must be at least 1", field="page", value=query.page)
        if query.limit < 1 or query.limit > MAX_PAGE_SIZE:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}", field="limit", value=query.limit)

        account_filter = AccountListFilter(
            role=Role.create(query.role).value if query.role else None,
            banned=query.banned,
            onboarding_completed=query.onboarding_completed,
            page=query.page,
            limit=query.limit,
        )
        page = await self._account_repository.list(account_filter)
        logger.debug(f"Listed {len(page.items)} of {page.total} accounts (page {page.page})")
        return page
