# 📄 File: lawmarket/modules/clients/presentation/api/v1/clients.py
# 🧭 Purpose (Layman Explanation):
# Lets a client look at and edit their own profile, and lets admins browse client profiles.
#
# 🧪 Purpose (Technical Summary):
# /clients routes. "me" routes act on the caller's own profile; id and list routes require the
# admin predicate, checked in the query handlers.
#
# 🔗 Dependencies:
# FastAPI, clients handlers / schemas / dependencies
#
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router

"""
Clients API Endpoints

Endpoints:
- GET /me: Get my client profile
- PATCH /me: Update my client profile
- POST /me/specializations: Add a specialization
- DELETE /me/specializations/{specialization_id}: Remove a specialization
- GET /: List client profiles (admin)
- GET /{profile_id}: Get a client profile (admin)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.presentation.dependencies import get_current_account
from lawmarket.modules.clients.application.commands.update_client_profile import (
    AddClientSpecializationCommand,
    RemoveClientSpecializationCommand,
    UpdateClientProfileCommand,
)
from lawmarket.modules.clients.application.handlers.command_handlers import (
    AddClientSpecializationCommandHandler,
    RemoveClientSpecializationCommandHandler,
    UpdateClientProfileCommandHandler,
)
from lawmarket.modules.clients.application.handlers.query_handlers import (
    GetClientProfileQueryHandler,
    GetMyClientProfileQueryHandler,
    ListClientProfilesQueryHandler,
)
from lawmarket.modules.clients.application.queries.get_client_profile import (
    GetClientProfileQuery,
    GetMyClientProfileQuery,
    ListClientProfilesQuery,
)
from lawmarket.modules.clients.presentation.api.schemas.client_schemas import (
    AddSpecializationRequest,
    ClientProfileResponse,
    UpdateClientProfileRequest,
)
from lawmarket.modules.clients.presentation.dependencies import (
    get_add_client_specialization_handler,
    get_client_profile_handler,
    get_list_client_profiles_handler,
    get_my_client_profile_handler,
    get_remove_client_specialization_handler,
    get_update_client_profile_handler,
)
from lawmarket.shared.core.schemas import ApiResponse

logger = logging.getLogger(__name__)

clients_router = APIRouter()


@clients_router.get(
    "/me",
    response_model=ApiResponse[ClientProfileResponse],
    summary="Get my client profile",
    responses={404: {"description": "Onboarding not completed"}},
)
async def get_my_profile(
    current_account: Account = Depends(get_current_account),
    handler: GetMyClientProfileQueryHandler = Depends(get_my_client_profile_handler),
) -> ApiResponse[ClientProfileResponse]:
    profile = await handler.handle(GetMyClientProfileQuery(account_id=current_account.id))
    return ApiResponse[ClientProfileResponse](data=ClientProfileResponse.from_domain(profile))


@clients_router.patch(
    "/me",
    response_model=ApiResponse[ClientProfileResponse],
    summary="Update my client profile",
)
async def update_my_profile(
    request: UpdateClientProfileRequest,
    current_account: Account = Depends(get_current_account),
    handler: UpdateClientProfileCommandHandler = Depends(get_update_client_profile_handler),
) -> ApiResponse[ClientProfileResponse]:
    command = UpdateClientProfileCommand(account_id=current_account.id, **request.model_dump())
    profile = await handler.handle(command)
    return ApiResponse[ClientProfileResponse](
        message="Client profile updated successfully",
        data=ClientProfileResponse.from_domain(profile),
    )


@clients_router.post(
    "/me/specializations",
    response_model=ApiResponse[ClientProfileResponse],
    summary="Add a specialization",
)
async def add_specialization(
    request: AddSpecializationRequest,
    current_account: Account = Depends(get_current_account),
    handler: AddClientSpecializationCommandHandler = Depends(get_add_client_specialization_handler),
) -> ApiResponse[ClientProfileResponse]:
    command = AddClientSpecializationCommand(
        account_id=current_account.id,
        specialization_id=request.specialization_id,
    )
    profile = await handler.handle(command)
    return ApiResponse[ClientProfileResponse](data=ClientProfileResponse.from_domain(profile))


@clients_router.delete(
    "/me/specializations/{specialization_id}",
    response_model=ApiResponse[ClientProfileResponse],
    summary="Remove a specialization",
)
async def remove_specialization(
    specialization_id: str,
    current_account: Account = Depends(get_current_account),
    handler: RemoveClientSpecializationCommandHandler = Depends(get_remove_client_specialization_handler),
) -> ApiResponse[ClientProfileResponse]:
    command = RemoveClientSpecializationCommand(
        account_id=current_account.id,
        specialization_id=specialization_id,
    )
    profile = await handler.handle(command)
    return ApiResponse[ClientProfileResponse](data=ClientProfileResponse.from_domain(profile))


@clients_router.get(
    "",
    response_model=ApiResponse[List[ClientProfileResponse]],
    summary="List client profiles",
    responses={403: {"description": "Admin privileges required"}},
)
async def list_clients(
    current_account: Account = Depends(get_current_account),
    handler: ListClientProfilesQueryHandler = Depends(get_list_client_profiles_handler),
) -> ApiResponse[List[ClientProfileResponse]]:
    profiles = await handler.handle(current_account, ListClientProfilesQuery())
    return ApiResponse[List[ClientProfileResponse]](
        data=[ClientProfileResponse.from_domain(profile) for profile in profiles]
    )


@clients_router.get(
    "/{profile_id}",
    response_model=ApiResponse[ClientProfileResponse],
    summary="Get client profile",
    responses={403: {"description": "Admin privileges required"}, 404: {"description": "Client not found"}},
)
async def get_client(
    profile_id: str,
    current_account: Account = Depends(get_current_account),
    handler: GetClientProfileQueryHandler = Depends(get_client_profile_handler),
) -> ApiResponse[ClientProfileResponse]:
    profile = await handler.handle(current_account, GetClientProfileQuery(profile_id=profile_id))
    return ApiResponse[ClientProfileResponse](data=ClientProfileResponse.from_domain(profile))
