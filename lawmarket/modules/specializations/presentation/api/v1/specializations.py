# 📄 File: lawmarket/modules/specializations/presentation/api/v1/specializations.py
# 🧭 Purpose (Layman Explanation):
# Public list of the areas of law clients and lawyers can pick.
# 🧪 Purpose (Technical Summary):
# GET /specializations. No authentication; the catalog is not sensitive.
# 🔗 Dependencies:
# FastAPI, ListSpecializationsQueryHandler
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router

from typing import List

from fastapi import APIRouter, Depends

from lawmarket.modules.specializations.application.handlers.query_handlers import ListSpecializationsQueryHandler
from lawmarket.modules.specializations.application.queries.list_specializations import ListSpecializationsQuery
from lawmarket.modules.specializations.presentation.api.schemas.specialization_schemas import (
    SpecializationResponse,
)
from lawmarket.modules.specializations.presentation.dependencies import get_list_specializations_handler
from lawmarket.shared.core.schemas import ApiResponse

specializations_router = APIRouter()


@specializations_router.get(
    "",
    response_model=ApiResponse[List[SpecializationResponse]],
    summary="List specializations",
)
async def list_specializations(
    handler: ListSpecializationsQueryHandler = Depends(get_list_specializations_handler),
) -> ApiResponse[List[SpecializationResponse]]:
    specializations = await handler.handle(ListSpecializationsQuery())
    return ApiResponse[List[SpecializationResponse]](
        data=[SpecializationResponse.from_domain(item) for item in specializations]
    )
