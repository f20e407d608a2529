# 📄 File: lawmarket/modules/lawyers/domain/services/lawyer_domain_service.py
# 🧭 Purpose (Layman Explanation):
# Checks that look beyond a single application: one lawyer profile per person, one owner per
# bar number, and practice areas that really exist.
#
# 🧪 Purpose (Technical Summary):
# Domain service for LawyerProfile cross-aggregate rules. Uniqueness checks here give fast,
# friendly errors; the unique constraints on lawyer_profiles are the real guarantee.
#
# 🔗 Dependencies:
# LawyerProfileRepository, SpecializationRepository, catalog lookup helper
#
# 🔄 Connected Modules / Calls From:
# lawyer command handlers

from typing import Sequence

from lawmarket.modules.lawyers.domain.repositories.lawyer_profile_repository import LawyerProfileRepository
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.modules.specializations.domain.services.catalog import find_unknown_specialization_ids
from lawmarket.shared.core.exceptions import (
    BarNumberAlreadyRegisteredError,
    LawyerProfileAlreadyExistsError,
    ValidationError,
)


class LawyerDomainService:
    def __init__(
        self,
        lawyer_repository: LawyerProfileRepository,
        specialization_repository: SpecializationRepository,
    ):
        self._lawyer_repository = lawyer_repository
        self._specialization_repository = specialization_repository

    async def ensure_lawyer_does_not_exist(self, account_id: str) -> None:
        if await self._lawyer_repository.exists_by_account_id(account_id):
            raise LawyerProfileAlreadyExistsError(account_id)

    async def ensure_bar_number_available(self, bar_number: str) -> None:
        if await self._lawyer_repository.exists_by_bar_number(bar_number.strip()):
            raise BarNumberAlreadyRegisteredError(bar_number.strip())

    async def validate_specializations(self, specialization_ids: Sequence[str]) -> None:
        unknown = await find_unknown_specialization_ids(self._specialization_repository, specialization_ids)
        if unknown:
            raise ValidationError(
                f"Invalid specialization IDs: {', '.join(unknown)}",
                field="specialization_ids",
                invalid_ids=unknown,
            )
