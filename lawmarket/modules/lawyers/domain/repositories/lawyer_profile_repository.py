# 📄 File: lawmarket/modules/lawyers/domain/repositories/lawyer_profile_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how lawyer applications are stored and found, without tying the rules to a database.
#
# 🧪 Purpose (Technical Summary):
# Abstract repository for the LawyerProfile aggregate. save/update are atomic over the profile
# row and its documents, specializations and languages; the child-set methods replace or
# append one set in their own transaction.
#
# 🔗 Dependencies:
# abc, LawyerProfile and lawyer value objects
#
# 🔄 Connected Modules / Calls From:
# LawyerProfileRepositoryImpl, LawyerDomainService, lawyer command and query handlers

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.models.value_objects import LawyerDocument, LawyerSpecialization


class LawyerProfileRepository(ABC):
    """
    Repository interface for LawyerProfile aggregates.
    """

    @abstractmethod
    async def find_by_id(self, profile_id: str) -> Optional[LawyerProfile]:
        pass

    @abstractmethod
    async def find_by_account_id(self, account_id: str) -> Optional[LawyerProfile]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[LawyerProfile]:
        pass

    @abstractmethod
    async def exists_by_account_id(self, account_id: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_bar_number(self, bar_number: str) -> bool:
        pass

    @abstractmethod
    async def save(self, profile: LawyerProfile) -> LawyerProfile:
        """
        Persist a new profile with all of its child rows.

        Raises:
            LawyerProfileAlreadyExistsError: If the account already has one
        """
        pass

    @abstractmethod
    async def update(self, profile: LawyerProfile) -> LawyerProfile:
        """
        Persist an existing profile, replacing documents, specializations
        and languages wholesale.

        Raises:
            LawyerProfileNotFoundError: If the profile row is gone
            BarNumberAlreadyRegisteredError: If the bar number is taken
        """
        pass

    @abstractmethod
    async def save_documents(self, profile_id: str, documents: Sequence[LawyerDocument]) -> None:
        """Append documents to a profile."""
        pass

    @abstractmethod
    async def save_specializations(self, profile_id: str, specializations: Sequence[LawyerSpecialization]) -> None:
        """Replace the whole specialization set of a profile."""
        pass

    @abstractmethod
    async def save_languages(self, profile_id: str, language_ids: Sequence[str]) -> None:
        """Replace the whole language set of a profile."""
        pass
