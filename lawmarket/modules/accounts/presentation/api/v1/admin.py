# 📄 File: lawmarket/modules/accounts/presentation/api/v1/admin.py
# 🧭 Purpose (Layman Explanation):
# The admin panel endpoints: browse users, ban and unban them, and change their role.
#
# 🧪 Purpose (Technical Summary):
# /admin/users routes. Authorization (admin, not banned, not self, not another admin) is
# enforced inside the handlers through AccountDomainService, never in the router.
#
# 🔗 Dependencies:
# FastAPI APIRouter/Query, accounts handlers, schemas and dependencies, settings
#
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router

"""
Admin API Endpoints

Endpoints:
- GET /users: List users (paginated, filterable by role / banned / onboardingCompleted)
- GET /users/{account_id}: Get one user
- POST /users/{account_id}/ban: Ban a user
- POST /users/{account_id}/unban: Lift a ban
- PATCH /users/{account_id}/role: Change a user's role
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from lawmarket.modules.accounts.application.commands.ban_account import BanAccountCommand, UnbanAccountCommand
from lawmarket.modules.accounts.application.commands.change_account_role import ChangeAccountRoleCommand
from lawmarket.modules.accounts.application.handlers.command_handlers import (
    BanAccountCommandHandler,
    ChangeAccountRoleCommandHandler,
    UnbanAccountCommandHandler,
)
from lawmarket.modules.accounts.application.handlers.query_handlers import (
    GetAccountQueryHandler,
    ListAccountsQueryHandler,
)
from lawmarket.modules.accounts.application.queries.get_account import GetAccountQuery, ListAccountsQuery
from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import RoleType
from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.modules.accounts.presentation.api.schemas.account_schemas import (
    AccountListResponse,
    AccountResponse,
    BanAccountRequest,
    ChangeRoleRequest,
)
from lawmarket.modules.accounts.presentation.dependencies import (
    get_account_domain_service,
    get_account_query_handler,
    get_ban_account_handler,
    get_change_account_role_handler,
    get_current_account,
    get_list_accounts_handler,
    get_unban_account_handler,
)
from lawmarket.shared.config.settings import get_settings
from lawmarket.shared.core.schemas import ApiResponse

logger = logging.getLogger(__name__)
settings = get_settings()

admin_router = APIRouter()


@admin_router.get(
    "/users",
    response_model=ApiResponse[AccountListResponse],
    summary="List users",
    responses={403: {"description": "Admin privileges required"}},
)
async def list_users(
    role: Optional[RoleType] = Query(None),
    banned: Optional[bool] = Query(None),
    onboarding_completed: Optional[bool] = Query(None, alias="onboardingCompleted"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_account: Account = Depends(get_current_account),
    handler: ListAccountsQueryHandler = Depends(get_list_accounts_handler),
) -> ApiResponse[AccountListResponse]:
    query = ListAccountsQuery(
        role=role.value if role else None,
        banned=banned,
        onboarding_completed=onboarding_completed,
        page=page,
        limit=limit,
    )
    result = await handler.handle(current_account, query)
    return ApiResponse[AccountListResponse](data=AccountListResponse.from_page(result))


@admin_router.get(
    "/users/{account_id}",
    response_model=ApiResponse[AccountResponse],
    summary="Get user",
    responses={403: {"description": "Admin privileges required"}, 404: {"description": "User not found"}},
)
async def get_user(
    account_id: str,
    current_account: Account = Depends(get_current_account),
    domain_service: AccountDomainService = Depends(get_account_domain_service),
    handler: GetAccountQueryHandler = Depends(get_account_query_handler),
) -> ApiResponse[AccountResponse]:
    domain_service.ensure_can_perform_admin_action(current_account)
    account = await handler.handle(GetAccountQuery(account_id=account_id))
    return ApiResponse[AccountResponse](data=AccountResponse.from_domain(account))


@admin_router.post(
    "/users/{account_id}/ban",
    response_model=ApiResponse[AccountResponse],
    summary="Ban user",
    responses={
        400: {"description": "Invalid ban request or user already banned"},
        403: {"description": "Not allowed to ban this user"},
        404: {"description": "User not found"},
    },
)
async def ban_user(
    account_id: str,
    request: BanAccountRequest,
    current_account: Account = Depends(get_current_account),
    handler: BanAccountCommandHandler = Depends(get_ban_account_handler),
) -> ApiResponse[AccountResponse]:
    command = BanAccountCommand(
        target_account_id=account_id,
        reason=request.reason,
        expires_at=request.expires_at,
    )
    account = await handler.handle(current_account, command)
    return ApiResponse[AccountResponse](message="User banned successfully", data=AccountResponse.from_domain(account))


@admin_router.post(
    "/users/{account_id}/unban",
    response_model=ApiResponse[AccountResponse],
    summary="Unban user",
    responses={400: {"description": "User is not banned"}, 404: {"description": "User not found"}},
)
async def unban_user(
    account_id: str,
    current_account: Account = Depends(get_current_account),
    handler: UnbanAccountCommandHandler = Depends(get_unban_account_handler),
) -> ApiResponse[AccountResponse]:
    account = await handler.handle(current_account, UnbanAccountCommand(target_account_id=account_id))
    return ApiResponse[AccountResponse](message="User unbanned successfully", data=AccountResponse.from_domain(account))


@admin_router.patch(
    "/users/{account_id}/role",
    response_model=ApiResponse[AccountResponse],
    summary="Change user role",
    responses={
        400: {"description": "Invalid role or user already has it"},
        403: {"description": "Not allowed to change this user's role"},
    },
)
async def change_user_role(
    account_id: str,
    request: ChangeRoleRequest,
    current_account: Account = Depends(get_current_account),
    handler: ChangeAccountRoleCommandHandler = Depends(get_change_account_role_handler),
) -> ApiResponse[AccountResponse]:
    command = ChangeAccountRoleCommand(target_account_id=account_id, role=request.role.value)
    account = await handler.handle(current_account, command)
    return ApiResponse[AccountResponse](message="User role updated successfully", data=AccountResponse.from_domain(account))
