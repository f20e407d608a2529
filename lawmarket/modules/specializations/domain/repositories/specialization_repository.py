# 📄 File: lawmarket/modules/specializations/domain/repositories/specialization_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how the rest of the app may look up practice areas, without caring where they are stored.
# 🧪 Purpose (Technical Summary):
# Abstract repository contract for the read-mostly specialization catalog.
# 🔗 Dependencies:
# abc, Specialization domain model
# 🔄 Connected Modules / Calls From:
# SpecializationRepositoryImpl, ClientDomainService, LawyerDomainService, catalog query handler

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lawmarket.modules.specializations.domain.models.specialization import Specialization


class SpecializationRepository(ABC):
    """
    Repository interface for the specialization catalog.
    """

    @abstractmethod
    async def find_all(self) -> List[Specialization]:
        """
        Retrieve the whole catalog ordered by name.

        Returns:
            List[Specialization]: Every known specialization
        """
        pass

    @abstractmethod
    async def find_by_id(self, specialization_id: str) -> Optional[Specialization]:
        pass

    @abstractmethod
    async def find_by_ids(self, specialization_ids: Sequence[str]) -> List[Specialization]:
        """
        Retrieve the specializations whose ids appear in the given set.

        Args:
            specialization_ids: Ids to look up; unknown ids are skipped

        Returns:
            List[Specialization]: Found specializations, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Specialization]:
        pass

    @abstractmethod
    async def exists_by_ids(self, specialization_ids: Sequence[str]) -> bool:
        """
        Check that every id in the set exists in the catalog.

        Returns:
            bool: True only if no id is missing
        """
        pass

    @abstractmethod
    async def save(self, specialization: Specialization) -> Specialization:
        pass
