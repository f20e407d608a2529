# 📄 File: lawmarket/modules/clients/presentation/api/v1/onboarding.py
# 🧭 Purpose (Layman Explanation):
# The single step a new client takes to finish signing up.
#
# 🧪 Purpose (Technical Summary):
# POST /onboarding/complete. The display name comes from the caller's account and the
# verified-email flag from the resolved session; the handler does every other check.
#
# 🔗 Dependencies:
# FastAPI, CompleteOnboardingCommandHandler, accounts and clients dependencies
#
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router

import logging

from fastapi import APIRouter, Depends, status

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.infrastructure.external.session_provider import SessionIdentity
from lawmarket.modules.accounts.presentation.dependencies import get_current_account, get_current_session
from lawmarket.modules.clients.application.commands.complete_onboarding import CompleteOnboardingCommand
from lawmarket.modules.clients.application.handlers.command_handlers import CompleteOnboardingCommandHandler
from lawmarket.modules.clients.presentation.api.schemas.client_schemas import (
    CompleteOnboardingRequest,
    OnboardingResultResponse,
)
from lawmarket.modules.clients.presentation.dependencies import get_complete_onboarding_handler
from lawmarket.shared.core.schemas import ApiResponse

logger = logging.getLogger(__name__)

onboarding_router = APIRouter()


@onboarding_router.post(
    "/complete",
    response_model=ApiResponse[OnboardingResultResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Complete client onboarding",
    responses={
        400: {"description": "Invalid onboarding data"},
        401: {"description": "Not authenticated or email not verified"},
        409: {"description": "Client profile already exists"},
    },
)
async def complete_onboarding(
    request: CompleteOnboardingRequest,
    identity: SessionIdentity = Depends(get_current_session),
    current_account: Account = Depends(get_current_account),
    handler: CompleteOnboardingCommandHandler = Depends(get_complete_onboarding_handler),
) -> ApiResponse[OnboardingResultResponse]:
    command = CompleteOnboardingCommand(
        account_id=current_account.id,
        display_name=current_account.display_name,
        email_verified=identity.email_verified,
        phone_number=request.phone_number,
        country=request.country,
        state=request.state,
        company=request.company,
        specialization_ids=request.specialization_ids,
    )
    result = await handler.handle(command)
    return ApiResponse[OnboardingResultResponse](
        message="Onboarding completed successfully",
        data=OnboardingResultResponse.from_result(result),
    )
