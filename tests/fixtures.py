"""
In-memory repositories and helpers shared by the unit and API tests.

Repositories store deep copies so a test only observes what a handler
actually persisted.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import Role
from lawmarket.modules.accounts.domain.repositories.account_repository import (
    AccountListFilter,
    AccountPage,
    AccountRepository,
)
from lawmarket.modules.accounts.infrastructure.external.session_provider import SessionIdentity, SessionProvider
from lawmarket.modules.clients.domain.models.client_profile import ClientProfile
from lawmarket.modules.clients.domain.repositories.client_profile_repository import ClientProfileRepository
from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.models.value_objects import LawyerDocument, LawyerSpecialization
from lawmarket.modules.lawyers.domain.repositories.lawyer_profile_repository import LawyerProfileRepository
from lawmarket.modules.specializations.domain.models.specialization import Specialization
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.shared.core.exceptions import (
    AccountNotFoundError,
    BarNumberAlreadyRegisteredError,
    ClientProfileAlreadyExistsError,
    ClientProfileNotFoundError,
    LawyerProfileAlreadyExistsError,
    LawyerProfileNotFoundError,
)
from lawmarket.shared.events.base import DomainEvent
from lawmarket.shared.events.publisher import EventPublisher
from lawmarket.shared.utils.helpers import generate_id, utc_now

FAMILY_LAW_ID = "0b6f5a5e-3c1d-4a8e-9f2b-1d2c3e4f5a60"
CRIMINAL_LAW_ID = "1c7a6b6f-4d2e-4b9f-8a3c-2e3d4f5a6b71"
CORPORATE_LAW_ID = "2d8b7c7a-5e3f-4caa-9b4d-3f4e5a6b7c82"
IMMIGRATION_LAW_ID = "3e9c8d8b-6f4a-4dbb-8c5e-4a5f6b7c8d93"
UNKNOWN_SPECIALIZATION_ID = "9f9f9f9f-0000-4000-8000-000000000000"


# =============================================================================
# BUILDERS
# =============================================================================

def make_catalog() -> List[Specialization]:
    return [
        Specialization.create("Family Law", specialization_id=FAMILY_LAW_ID),
        Specialization.create("Criminal Law", specialization_id=CRIMINAL_LAW_ID),
        Specialization.create("Corporate Law", specialization_id=CORPORATE_LAW_ID),
        Specialization.create("Immigration Law", specialization_id=IMMIGRATION_LAW_ID),
    ]


def make_account(
    role: str = "client",
    display_name: str = "Test User",
    email: Optional[str] = None,
    email_verified: bool = True,
    banned: bool = False,
    ban_reason: Optional[str] = None,
    ban_expires_at: Optional[datetime] = None,
    account_id: Optional[str] = None,
) -> Account:
    account_id = account_id or generate_id()
    return Account.reconstitute(
        account_id=account_id,
        display_name=display_name,
        email=email or f"{account_id[:8]}@lawmarket.com",
        email_verified=email_verified,
        avatar_url=None,
        role=Role.create(role),
        banned=banned,
        ban_reason=ban_reason if banned else None,
        ban_expires_at=ban_expires_at if banned else None,
        onboarding_completed=False,
        created_at=utc_now(),
    )


def identity_for(account: Account, email_verified: Optional[bool] = None) -> SessionIdentity:
    return SessionIdentity(
        account_id=account.id,
        display_name=account.display_name,
        email=account.email,
        email_verified=account.email_verified if email_verified is None else email_verified,
    )


# =============================================================================
# EVENTS AND SESSIONS
# =============================================================================

class RecordingEventPublisher(EventPublisher):
    """EventPublisher that also keeps every published event."""

    def __init__(self):
        super().__init__()
        self.events: List[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)
        await super().publish(event)

    @property
    def event_types(self) -> List[str]:
        return [event.event_type for event in self.events]


class FakeSessionProvider(SessionProvider):
    def __init__(self, sessions: Optional[Dict[str, SessionIdentity]] = None):
        self.sessions: Dict[str, SessionIdentity] = dict(sessions or {})

    def register(self, token: str, identity: SessionIdentity) -> None:
        self.sessions[token] = identity

    async def resolve(self, access_token: str) -> Optional[SessionIdentity]:
        return self.sessions.get(access_token)


# =============================================================================
# REPOSITORIES
# =============================================================================

class InMemoryAccountRepository(AccountRepository):
    def __init__(self, accounts: Sequence[Account] = ()):
        self._accounts: Dict[str, Account] = {}
        self.update_calls = 0
        for account in accounts:
            self.add(account)

    def add(self, account: Account) -> Account:
        self._accounts[account.id] = account.model_copy(deep=True)
        return account

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        account = self._accounts.get(account_id)
        return account.model_copy(deep=True) if account else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email == email.strip().lower():
                return account.model_copy(deep=True)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def list(self, account_filter: AccountListFilter) -> AccountPage:
        matches = [
            account for account in self._accounts.values()
            if (account_filter.role is None or account.role.value == account_filter.role)
            and (account_filter.banned is None or account.banned == account_filter.banned)
            and (
                account_filter.onboarding_completed is None
                or account.onboarding_completed == account_filter.onboarding_completed
            )
        ]
        matches.sort(key=lambda account: (account.created_at, account.id))
        start = account_filter.offset
        items = [account.model_copy(deep=True) for account in matches[start:start + account_filter.limit]]
        return AccountPage.build(items=items, page=account_filter.page, limit=account_filter.limit, total=len(matches))

    async def update(self, account: Account) -> Account:
        if account.id not in self._accounts:
            raise AccountNotFoundError(account.id)
        self.update_calls += 1
        self._accounts[account.id] = account.model_copy(deep=True)
        return account


class InMemorySpecializationRepository(SpecializationRepository):
    def __init__(self, specializations: Sequence[Specialization] = ()):
        self._items: Dict[str, Specialization] = {s.id: s for s in specializations}

    async def find_all(self) -> List[Specialization]:
        return sorted(self._items.values(), key=lambda s: s.name)

    async def find_by_id(self, specialization_id: str) -> Optional[Specialization]:
        return self._items.get(specialization_id)

    async def find_by_ids(self, specialization_ids: Sequence[str]) -> List[Specialization]:
        return [self._items[sid] for sid in set(specialization_ids) if sid in self._items]

    async def find_by_name(self, name: str) -> Optional[Specialization]:
        for specialization in self._items.values():
            if specialization.name.lower() == name.strip().lower():
                return specialization
        return None

    async def exists_by_ids(self, specialization_ids: Sequence[str]) -> bool:
        return all(sid in self._items for sid in specialization_ids)

    async def save(self, specialization: Specialization) -> Specialization:
        self._items[specialization.id] = specialization
        return specialization


class InMemoryClientProfileRepository(ClientProfileRepository):
    def __init__(self):
        self._profiles: Dict[str, ClientProfile] = {}
        self.save_calls = 0
        self.update_calls = 0

    async def find_by_id(self, profile_id: str) -> Optional[ClientProfile]:
        profile = self._profiles.get(profile_id)
        return profile.model_copy(deep=True) if profile else None

    async def find_by_account_id(self, account_id: str) -> Optional[ClientProfile]:
        for profile in self._profiles.values():
            if profile.account_id == account_id:
                return profile.model_copy(deep=True)
        return None

    async def find_all(self) -> List[ClientProfile]:
        profiles = sorted(self._profiles.values(), key=lambda p: (p.created_at, p.id))
        return [profile.model_copy(deep=True) for profile in profiles]

    async def save(self, profile: ClientProfile) -> ClientProfile:
        self.save_calls += 1
        if any(existing.account_id == profile.account_id for existing in self._profiles.values()):
            raise ClientProfileAlreadyExistsError(profile.account_id)
        self._profiles[profile.id] = profile.model_copy(deep=True)
        return profile

    async def update(self, profile: ClientProfile) -> ClientProfile:
        if profile.id not in self._profiles:
            raise ClientProfileNotFoundError("Client not found", resource_id=profile.id)
        self.update_calls += 1
        self._profiles[profile.id] = profile.model_copy(deep=True)
        return profile

    def __len__(self) -> int:
        return len(self._profiles)


class InMemoryLawyerProfileRepository(LawyerProfileRepository):
    def __init__(self):
        self._profiles: Dict[str, LawyerProfile] = {}
        self.save_calls = 0
        self.update_calls = 0

    def _bar_number_taken(self, profile: LawyerProfile) -> bool:
        if profile.bar_credentials is None:
            return False
        return any(
            other.id != profile.id
            and other.bar_credentials is not None
            and other.bar_credentials.bar_number == profile.bar_credentials.bar_number
            for other in self._profiles.values()
        )

    async def find_by_id(self, profile_id: str) -> Optional[LawyerProfile]:
        profile = self._profiles.get(profile_id)
        return profile.model_copy(deep=True) if profile else None

    async def find_by_account_id(self, account_id: str) -> Optional[LawyerProfile]:
        for profile in self._profiles.values():
            if profile.account_id == account_id:
                return profile.model_copy(deep=True)
        return None

    async def find_by_email(self, email: str) -> Optional[LawyerProfile]:
        for profile in self._profiles.values():
            if profile.email == email.strip().lower():
                return profile.model_copy(deep=True)
        return None

    async def exists_by_account_id(self, account_id: str) -> bool:
        return any(profile.account_id == account_id for profile in self._profiles.values())

    async def exists_by_bar_number(self, bar_number: str) -> bool:
        return any(
            profile.bar_credentials is not None and profile.bar_credentials.bar_number == bar_number
            for profile in self._profiles.values()
        )

    async def save(self, profile: LawyerProfile) -> LawyerProfile:
        self.save_calls += 1
        if await self.exists_by_account_id(profile.account_id):
            raise LawyerProfileAlreadyExistsError(profile.account_id)
        self._profiles[profile.id] = profile.model_copy(deep=True)
        return profile

    async def update(self, profile: LawyerProfile) -> LawyerProfile:
        if profile.id not in self._profiles:
            raise LawyerProfileNotFoundError("Lawyer profile not found", resource_id=profile.id)
        if self._bar_number_taken(profile):
            raise BarNumberAlreadyRegisteredError(profile.bar_credentials.bar_number)
        self.update_calls += 1
        self._profiles[profile.id] = profile.model_copy(deep=True)
        return profile

    async def save_documents(self, profile_id: str, documents: Sequence[LawyerDocument]) -> None:
        stored = self._profiles[profile_id]
        stored.documents = stored.documents + list(documents)

    async def save_specializations(self, profile_id: str, specializations: Sequence[LawyerSpecialization]) -> None:
        self._profiles[profile_id].specializations = list(specializations)

    async def save_languages(self, profile_id: str, language_ids: Sequence[str]) -> None:
        self._profiles[profile_id].language_ids = list(language_ids)
