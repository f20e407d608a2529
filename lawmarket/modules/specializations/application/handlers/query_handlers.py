# 📄 File: lawmarket/modules/specializations/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Fetches the practice-area catalog for the sign-up forms.
# 🧪 Purpose (Technical Summary):
# Read-only handler over SpecializationRepository.
# 🔗 Dependencies:
# SpecializationRepository
# 🔄 Connected Modules / Calls From:
# specializations router

from typing import List

from lawmarket.modules.specializations.application.queries.list_specializations import ListSpecializationsQuery
from lawmarket.modules.specializations.domain.models.specialization import Specialization
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)


class ListSpecializationsQueryHandler:
    def __init__(self, specialization_repository: SpecializationRepository):
        self._specialization_repository = specialization_repository

    async def handle(self, query: ListSpecializationsQuery) -> List[Specialization]:
        return await self._specialization_repository.find_all()
