# 📄 File: lawmarket/modules/lawyers/presentation/api/v1/lawyers.py
# 🧭 Purpose (Layman Explanation):
# The screens a lawyer goes through to apply: personal details, credentials and files,
# practice areas and languages, then sending the application in.
#
# 🧪 Purpose (Technical Summary):
# /lawyers routes driving the onboarding state machine. Step order violations come back as
# 409 INVALID_ONBOARDING_STEP / INCOMPLETE_ONBOARDING from the aggregate.
#
# 🔗 Dependencies:
# FastAPI, lawyers handlers / schemas / dependencies, accounts dependencies
#
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router

"""
Lawyers API Endpoints

Endpoints:
- POST /onboarding: Start the application (basic info)
- PUT /onboarding/credentials: Save bar credentials and education
- POST /onboarding/documents: Attach verification documents
- PUT /onboarding/specializations: Save practice areas and languages
- POST /onboarding/submit: Submit for admin review
- GET /me: Get my lawyer profile
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.infrastructure.external.session_provider import SessionIdentity
from lawmarket.modules.accounts.presentation.dependencies import get_current_account, get_current_session
from lawmarket.modules.lawyers.application.commands.save_lawyer_credentials import (
    AddLawyerDocumentsCommand,
    DocumentInput,
    SaveLawyerCredentialsCommand,
)
from lawmarket.modules.lawyers.application.commands.save_lawyer_specializations import (
    SaveLawyerSpecializationsCommand,
    SpecializationInput,
)
from lawmarket.modules.lawyers.application.commands.start_lawyer_onboarding import StartLawyerOnboardingCommand
from lawmarket.modules.lawyers.application.commands.submit_lawyer_application import SubmitLawyerApplicationCommand
from lawmarket.modules.lawyers.application.handlers.command_handlers import (
    AddLawyerDocumentsCommandHandler,
    SaveLawyerCredentialsCommandHandler,
    SaveLawyerSpecializationsCommandHandler,
    StartLawyerOnboardingCommandHandler,
    SubmitLawyerApplicationCommandHandler,
)
from lawmarket.modules.lawyers.application.handlers.query_handlers import GetMyLawyerProfileQueryHandler
from lawmarket.modules.lawyers.application.queries.get_lawyer_profile import GetMyLawyerProfileQuery
from lawmarket.modules.lawyers.presentation.api.schemas.lawyer_schemas import (
    AddDocumentsRequest,
    DocumentRequest,
    LawyerProfileResponse,
    SaveCredentialsRequest,
    SaveSpecializationsRequest,
    StartLawyerOnboardingRequest,
)
from lawmarket.modules.lawyers.presentation.dependencies import (
    get_add_lawyer_documents_handler,
    get_my_lawyer_profile_handler,
    get_save_lawyer_credentials_handler,
    get_save_lawyer_specializations_handler,
    get_start_lawyer_onboarding_handler,
    get_submit_lawyer_application_handler,
)
from lawmarket.shared.core.schemas import ApiResponse

logger = logging.getLogger(__name__)

lawyers_router = APIRouter()

STEP_ERRORS = {409: {"description": "Wrong onboarding step or incomplete application"}}


def _to_document_inputs(documents: List[DocumentRequest]) -> List[DocumentInput]:
    return [
        DocumentInput(
            document_type=doc.type.value,
            url=doc.url,
            public_id=doc.public_id,
            original_name=doc.original_name,
            file_size=doc.file_size,
            mime_type=doc.mime_type,
        )
        for doc in documents
    ]


@lawyers_router.post(
    "/onboarding",
    response_model=ApiResponse[LawyerProfileResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Start lawyer onboarding",
    responses={
        401: {"description": "Not authenticated or email not verified"},
        409: {"description": "Lawyer profile already exists"},
    },
)
async def start_onboarding(
    request: StartLawyerOnboardingRequest,
    identity: SessionIdentity = Depends(get_current_session),
    current_account: Account = Depends(get_current_account),
    handler: StartLawyerOnboardingCommandHandler = Depends(get_start_lawyer_onboarding_handler),
) -> ApiResponse[LawyerProfileResponse]:
    command = StartLawyerOnboardingCommand(
        account_id=current_account.id,
        email=current_account.email,
        email_verified=identity.email_verified,
        first_name=request.first_name,
        middle_name=request.middle_name,
        last_name=request.last_name,
        phone_number=request.phone_number,
        country=request.country,
    )
    profile = await handler.handle(command)
    return ApiResponse[LawyerProfileResponse](
        message="Lawyer onboarding started",
        data=LawyerProfileResponse.from_domain(profile),
    )


@lawyers_router.put(
    "/onboarding/credentials",
    response_model=ApiResponse[LawyerProfileResponse],
    summary="Save bar credentials and education",
    responses=STEP_ERRORS,
)
async def save_credentials(
    request: SaveCredentialsRequest,
    current_account: Account = Depends(get_current_account),
    handler: SaveLawyerCredentialsCommandHandler = Depends(get_save_lawyer_credentials_handler),
) -> ApiResponse[LawyerProfileResponse]:
    command = SaveLawyerCredentialsCommand(
        account_id=current_account.id,
        bar_number=request.bar_number,
        bar_association=request.bar_association,
        issue_date=request.issue_date,
        expiry_date=request.expiry_date,
        law_school=request.law_school,
        graduation_year=request.graduation_year,
        current_firm=request.current_firm,
        documents=_to_document_inputs(request.documents),
    )
    profile = await handler.handle(command)
    return ApiResponse[LawyerProfileResponse](data=LawyerProfileResponse.from_domain(profile))


@lawyers_router.post(
    "/onboarding/documents",
    response_model=ApiResponse[LawyerProfileResponse],
    summary="Attach verification documents",
    responses=STEP_ERRORS,
)
async def add_documents(
    request: AddDocumentsRequest,
    current_account: Account = Depends(get_current_account),
    handler: AddLawyerDocumentsCommandHandler = Depends(get_add_lawyer_documents_handler),
) -> ApiResponse[LawyerProfileResponse]:
    command = AddLawyerDocumentsCommand(
        account_id=current_account.id,
        documents=_to_document_inputs(request.documents),
    )
    profile = await handler.handle(command)
    return ApiResponse[LawyerProfileResponse](data=LawyerProfileResponse.from_domain(profile))


@lawyers_router.put(
    "/onboarding/specializations",
    response_model=ApiResponse[LawyerProfileResponse],
    summary="Save practice areas and languages",
    responses=STEP_ERRORS,
)
async def save_specializations(
    request: SaveSpecializationsRequest,
    current_account: Account = Depends(get_current_account),
    handler: SaveLawyerSpecializationsCommandHandler = Depends(get_save_lawyer_specializations_handler),
) -> ApiResponse[LawyerProfileResponse]:
    command = SaveLawyerSpecializationsCommand(
        account_id=current_account.id,
        primary=[SpecializationInput(**item.model_dump()) for item in request.primary],
        secondary=[SpecializationInput(**item.model_dump()) for item in request.secondary],
        language_ids=request.language_ids,
    )
    profile = await handler.handle(command)
    return ApiResponse[LawyerProfileResponse](data=LawyerProfileResponse.from_domain(profile))


@lawyers_router.post(
    "/onboarding/submit",
    response_model=ApiResponse[LawyerProfileResponse],
    summary="Submit application for review",
    responses=STEP_ERRORS,
)
async def submit_application(
    current_account: Account = Depends(get_current_account),
    handler: SubmitLawyerApplicationCommandHandler = Depends(get_submit_lawyer_application_handler),
) -> ApiResponse[LawyerProfileResponse]:
    profile = await handler.handle(SubmitLawyerApplicationCommand(account_id=current_account.id))
    return ApiResponse[LawyerProfileResponse](
        message="Application submitted for review",
        data=LawyerProfileResponse.from_domain(profile),
    )


@lawyers_router.get(
    "/me",
    response_model=ApiResponse[LawyerProfileResponse],
    summary="Get my lawyer profile",
    responses={404: {"description": "Onboarding not started"}},
)
async def get_my_profile(
    current_account: Account = Depends(get_current_account),
    handler: GetMyLawyerProfileQueryHandler = Depends(get_my_lawyer_profile_handler),
) -> ApiResponse[LawyerProfileResponse]:
    profile = await handler.handle(GetMyLawyerProfileQuery(account_id=current_account.id))
    return ApiResponse[LawyerProfileResponse](data=LawyerProfileResponse.from_domain(profile))
