# 📄 File: lawmarket/modules/accounts/infrastructure/external/session_provider.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app needs to know about whoever is calling it: who they are and
# whether they have confirmed their email.
# 🧪 Purpose (Technical Summary):
# SessionIdentity value plus the SessionProvider contract that turns request credentials into an
# identity or None.
# 🔗 Dependencies:
# abc, pydantic
# 🔄 Connected Modules / Calls From:
# SupabaseSessionProvider, accounts presentation dependencies, test fakes

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SessionIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str
    display_name: str
    email: str
    email_verified: bool = False


class SessionProvider(ABC):
    @abstractmethod
    async def resolve(self, access_token: str) -> Optional[SessionIdentity]:
        """
        Resolve a bearer token to the caller identity.

        Returns:
            Optional[SessionIdentity]: None when the token is not a valid session
        """
        pass
