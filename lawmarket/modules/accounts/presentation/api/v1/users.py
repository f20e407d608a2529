# 📄 File: lawmarket/modules/accounts/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints where signed-in people read and edit their own account profile.
# 🧪 Purpose (Technical Summary):
# GET/PATCH /user/profile routed to the account query and profile command handlers.
# 🔗 Dependencies:
# FastAPI APIRouter, accounts presentation dependencies and schemas
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router

import logging

from fastapi import APIRouter, Depends

from lawmarket.modules.accounts.application.commands.update_account_profile import UpdateAccountProfileCommand
from lawmarket.modules.accounts.application.handlers.command_handlers import UpdateAccountProfileCommandHandler
from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.presentation.api.schemas.account_schemas import (
    AccountResponse,
    UpdateAccountProfileRequest,
)
from lawmarket.modules.accounts.presentation.dependencies import (
    get_current_account,
    get_update_account_profile_handler,
)
from lawmarket.shared.core.schemas import ApiResponse

logger = logging.getLogger(__name__)

users_router = APIRouter()


@users_router.get(
    "/profile",
    response_model=ApiResponse[AccountResponse],
    summary="Get current user profile",
    responses={401: {"description": "Authentication required"}},
)
async def get_profile(current_account: Account = Depends(get_current_account)) -> ApiResponse[AccountResponse]:
    return ApiResponse[AccountResponse](data=AccountResponse.from_domain(current_account))


@users_router.patch(
    "/profile",
    response_model=ApiResponse[AccountResponse],
    summary="Update current user profile",
    responses={
        400: {"description": "Invalid profile data"},
        401: {"description": "Authentication required"},
    },
)
async def update_profile(
    request: UpdateAccountProfileRequest,
    current_account: Account = Depends(get_current_account),
    handler: UpdateAccountProfileCommandHandler = Depends(get_update_account_profile_handler),
) -> ApiResponse[AccountResponse]:
    command = UpdateAccountProfileCommand(
        account_id=current_account.id,
        display_name=request.display_name,
        avatar_url=request.avatar_url,
    )
    account = await handler.handle(command)
    return ApiResponse[AccountResponse](
        message="Profile updated successfully",
        data=AccountResponse.from_domain(account),
    )
