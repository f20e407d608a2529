# 📄 File: lawmarket/modules/specializations/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives the endpoints access to the practice-area catalog.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency factories for the catalog repository and query handler.
# 🔗 Dependencies:
# FastAPI Depends, SpecializationRepositoryImpl
# 🔄 Connected Modules / Calls From:
# specializations router, clients and lawyers dependencies

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.specializations.application.handlers.query_handlers import ListSpecializationsQueryHandler
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.modules.specializations.infrastructure.database.specialization_repository_impl import (
    SpecializationRepositoryImpl,
)
from lawmarket.shared.infrastructure.database.session import get_db_session


def get_specialization_repository(session: AsyncSession = Depends(get_db_session)) -> SpecializationRepository:
    return SpecializationRepositoryImpl(session)


def get_list_specializations_handler(
    specialization_repository: SpecializationRepository = Depends(get_specialization_repository),
) -> ListSpecializationsQueryHandler:
    return ListSpecializationsQueryHandler(specialization_repository)
