# 📄 File: lawmarket/modules/clients/domain/repositories/client_profile_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how client profiles are found and stored, without naming the database.
#
# 🧪 Purpose (Technical Summary):
# Abstract repository contract for the ClientProfile aggregate. save() is the atomic
# multi-table write (profile + specialization links + account onboarding flag).
#
# 🔗 Dependencies:
# abc, ClientProfile domain model
#
# 🔄 Connected Modules / Calls From:
# ClientProfileRepositoryImpl, ClientDomainService, client command/query handlers

"""
Client Profile Repository Interface

Storage contract:
- at most one profile per account_id, enforced by a unique constraint;
  a violation surfaces as ConflictError
- save/update either write every related row or none of them
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from lawmarket.modules.clients.domain.models.client_profile import ClientProfile


class ClientProfileRepository(ABC):
    """
    Abstract repository interface for ClientProfile aggregate operations.
    """

    @abstractmethod
    async def find_by_id(self, profile_id: str) -> Optional[ClientProfile]:
        pass

    @abstractmethod
    async def find_by_account_id(self, account_id: str) -> Optional[ClientProfile]:
        """
        Retrieve the profile belonging to an account.

        Args:
            account_id: Owning account id

        Returns:
            Optional[ClientProfile]: Profile if the account onboarded as a client
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[ClientProfile]:
        pass

    @abstractmethod
    async def save(self, profile: ClientProfile) -> ClientProfile:
        """
        Insert a new profile, its specialization links, and mirror its
        onboarding flag onto the owning account, in one transaction.

        Raises:
            ConflictError: If a profile already exists for the account
            DatabaseError: For other storage failures
        """
        pass

    @abstractmethod
    async def update(self, profile: ClientProfile) -> ClientProfile:
        """
        Update an existing profile and fully replace its specialization set.

        Raises:
            ClientProfileNotFoundError: If the profile no longer exists
            DatabaseError: For other storage failures
        """
        pass
