# 📄 File: lawmarket/modules/clients/domain/models/client_profile.py
# 🧭 Purpose (Layman Explanation):
# A client's marketplace profile: where they are, how to reach them, and the one to three
# areas of law they need help with. Onboarding can only be completed once.
#
# 🧪 Purpose (Technical Summary):
# ClientProfile aggregate root (1:1 with Account). create validates and forces onboarding off;
# reconstitute trusts stored data. Mutations keep the specialization set within [1, 3] and
# record events on the embedded EntityMetadata.
#
# 🔗 Dependencies:
# pydantic, Location value object, client events, lawmarket.shared.domain.entity
#
# 🔄 Connected Modules / Calls From:
# ClientProfileRepository, ClientDomainService, client command handlers

from datetime import datetime
from typing import Iterable, List, Optional

from pydantic import BaseModel

from lawmarket.modules.clients.domain.events.client_events import (
    ClientOnboardingCompleted,
    ClientProfileCreated,
    ClientProfileUpdated,
)
from lawmarket.modules.clients.domain.models.location import Location
from lawmarket.shared.core.exceptions import ValidationError
from lawmarket.shared.domain.entity import (
    EntityMetadata,
    new_metadata,
    record_event,
    restore_metadata,
    touch,
)

MIN_SPECIALIZATIONS = 1
MAX_SPECIALIZATIONS = 3
MIN_DISPLAY_NAME_LENGTH = 2


def _validate_display_name(display_name: Optional[str]) -> str:
    name = (display_name or "").strip()
    if len(name) < MIN_DISPLAY_NAME_LENGTH:
        raise ValidationError("Name must be at least 2 characters", field="display_name", value=display_name)
    return name


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class ClientProfile(BaseModel):
    meta: EntityMetadata
    account_id: str
    display_name: str
    phone_number: Optional[str] = None
    location: Location
    company: Optional[str] = None
    specialization_ids: List[str]
    onboarding_completed: bool = False

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def create(
        cls,
        account_id: str,
        display_name: str,
        location: Location,
        specialization_ids: Iterable[str],
        phone_number: Optional[str] = None,
        company: Optional[str] = None,
        profile_id: Optional[str] = None,
    ) -> "ClientProfile":
        """
        Create a new, not yet onboarded client profile.

        Duplicate specialization ids collapse to one entry before the
        count is checked.

        Raises:
            ValidationError: On a blank account id, a short name, or a
                specialization count outside [1, 3]
        """
        if not account_id or not account_id.strip():
            raise ValidationError("User ID is required", field="account_id")
        name = _validate_display_name(display_name)

        ids = list(dict.fromkeys(specialization_ids))
        if len(ids) < MIN_SPECIALIZATIONS:
            raise ValidationError("At least one specialization is required", field="specialization_ids")
        if len(ids) > MAX_SPECIALIZATIONS:
            raise ValidationError("Maximum 3 specializations allowed", field="specialization_ids")

        profile = cls(
            meta=new_metadata(profile_id),
            account_id=account_id,
            display_name=name,
            phone_number=_clean_optional(phone_number),
            location=location,
            company=_clean_optional(company),
            specialization_ids=ids,
            onboarding_completed=False,
        )
        record_event(profile.meta, ClientProfileCreated(aggregate_id=profile.id, account_id=account_id))
        return profile

    @classmethod
    def reconstitute(
        cls,
        profile_id: str,
        account_id: str,
        display_name: str,
        phone_number: Optional[str],
        location: Location,
        company: Optional[str],
        specialization_ids: List[str],
        onboarding_completed: bool,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
    ) -> "ClientProfile":
        return cls(
            meta=restore_metadata(profile_id, created_at, updated_at),
            account_id=account_id,
            display_name=display_name,
            phone_number=phone_number,
            location=location,
            company=company,
            specialization_ids=list(specialization_ids),
            onboarding_completed=onboarding_completed,
        )

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def created_at(self) -> datetime:
        return self.meta.created_at

    @property
    def updated_at(self) -> datetime:
        return self.meta.updated_at

    @property
    def specialization_count(self) -> int:
        return len(self.specialization_ids)

    # =========================================================================
    # ONBOARDING
    # =========================================================================

    def complete_onboarding(self) -> None:
        if self.onboarding_completed:
            raise ValidationError("Onboarding already completed")
        if not self.specialization_ids:
            raise ValidationError("Specializations are required to complete onboarding", field="specialization_ids")

        self.onboarding_completed = True
        touch(self.meta)
        record_event(self.meta, ClientOnboardingCompleted(
            aggregate_id=self.id,
            account_id=self.account_id,
            specialization_count=self.specialization_count,
        ))

    # =========================================================================
    # SPECIALIZATIONS
    # =========================================================================

    def add_specialization(self, specialization_id: str) -> None:
        if len(self.specialization_ids) >= MAX_SPECIALIZATIONS:
            raise ValidationError("Maximum 3 specializations allowed", field="specialization_ids")
        if specialization_id in self.specialization_ids:
            raise ValidationError("Specialization already selected", field="specialization_ids", value=specialization_id)

        self.specialization_ids.append(specialization_id)
        self._mark_updated(["specialization_ids"])

    def remove_specialization(self, specialization_id: str) -> None:
        if specialization_id not in self.specialization_ids:
            raise ValidationError("Specialization not selected", field="specialization_ids", value=specialization_id)
        if len(self.specialization_ids) <= MIN_SPECIALIZATIONS:
            raise ValidationError("At least one specialization is required", field="specialization_ids")

        self.specialization_ids.remove(specialization_id)
        self._mark_updated(["specialization_ids"])

    # =========================================================================
    # PROFILE
    # =========================================================================

    def update_profile(
        self,
        display_name: Optional[str] = None,
        phone_number: Optional[str] = None,
        company: Optional[str] = None,
    ) -> None:
        updated: List[str] = []
        if display_name is not None:
            self.display_name = _validate_display_name(display_name)
            updated.append("display_name")
        if phone_number is not None:
            self.phone_number = _clean_optional(phone_number)
            updated.append("phone_number")
        if company is not None:
            self.company = _clean_optional(company)
            updated.append("company")

        if updated:
            self._mark_updated(updated)

    def relocate(self, location: Location) -> None:
        """Replace the location value object as a whole."""
        if location == self.location:
            return
        self.location = location
        self._mark_updated(["location"])

    def _mark_updated(self, fields: List[str]) -> None:
        touch(self.meta)
        record_event(self.meta, ClientProfileUpdated(aggregate_id=self.id, updated_fields=fields))
