# 📄 File: lawmarket/modules/clients/domain/services/client_domain_service.py
# 🧭 Purpose (Layman Explanation):
# Checks that need more than one profile to answer: does this person already have a client
# profile, and do the chosen practice areas exist?
#
# 🧪 Purpose (Technical Summary):
# Domain service for ClientProfile cross-aggregate rules: the fast 1:1 pre-check (the storage
# unique constraint remains the real guarantee) and catalog validation of specialization ids.
#
# 🔗 Dependencies:
# ClientProfileRepository, SpecializationRepository, catalog lookup helper
#
# 🔄 Connected Modules / Calls From:
# CompleteOnboardingCommandHandler, AddClientSpecializationCommandHandler

from typing import Sequence

from lawmarket.modules.clients.domain.repositories.client_profile_repository import ClientProfileRepository
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.modules.specializations.domain.services.catalog import find_unknown_specialization_ids
from lawmarket.shared.core.exceptions import ClientProfileAlreadyExistsError, ValidationError


class ClientDomainService:
    def __init__(
        self,
        client_repository: ClientProfileRepository,
        specialization_repository: SpecializationRepository,
    ):
        self._client_repository = client_repository
        self._specialization_repository = specialization_repository

    async def ensure_client_does_not_exist(self, account_id: str) -> None:
        existing = await self._client_repository.find_by_account_id(account_id)
        if existing is not None:
            raise ClientProfileAlreadyExistsError(account_id)

    async def validate_specializations(self, specialization_ids: Sequence[str]) -> None:
        """
        Raises:
            ValidationError: Naming every id missing from the catalog
        """
        unknown = await find_unknown_specialization_ids(self._specialization_repository, specialization_ids)
        if unknown:
            raise ValidationError(
                f"Invalid specialization IDs: {', '.join(unknown)}",
                field="specialization_ids",
                invalid_ids=unknown,
            )
