# 📄 File: lawmarket/modules/lawyers/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Looks up the caller's lawyer application.
# 🧪 Purpose (Technical Summary):
# Read-side handler over LawyerProfileRepository.
# 🔗 Dependencies:
# LawyerProfileRepository
# 🔄 Connected Modules / Calls From:
# lawyers router

from lawmarket.modules.lawyers.application.queries.get_lawyer_profile import GetMyLawyerProfileQuery
from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.repositories.lawyer_profile_repository import LawyerProfileRepository
from lawmarket.shared.core.exceptions import LawyerProfileNotFoundError


class GetMyLawyerProfileQueryHandler:
    def __init__(self, lawyer_repository: LawyerProfileRepository):
        self._lawyer_repository = lawyer_repository

    async def handle(self, query: GetMyLawyerProfileQuery) -> LawyerProfile:
        profile = await self._lawyer_repository.find_by_account_id(query.account_id)
        if profile is None:
            raise LawyerProfileNotFoundError()
        return profile
