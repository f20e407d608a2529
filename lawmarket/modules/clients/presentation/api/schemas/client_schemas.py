# 📄 File: lawmarket/modules/clients/presentation/api/schemas/client_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the client sign-up form and client profile look like on the web API.
#
# 🧪 Purpose (Technical Summary):
# Request/response models for the onboarding and clients routers. Request models check shape
# (lengths, UUID format, list size); business rules stay in the domain.
#
# 🔗 Dependencies:
# pydantic, lawmarket.shared.core.schemas
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients.presentation.api.v1.onboarding / clients

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from lawmarket.modules.clients.application.commands.complete_onboarding import CompleteOnboardingResult
from lawmarket.modules.clients.domain.models.client_profile import ClientProfile
from lawmarket.shared.core.schemas import CamelModel


def _ensure_uuid(value: str) -> str:
    try:
        UUID(value)
    except ValueError as e:
        raise ValueError(f"Invalid specialization ID: {value}") from e
    return value


class CompleteOnboardingRequest(CamelModel):
    phone_number: Optional[str] = Field(None, max_length=32)
    country: str = Field(..., min_length=2, max_length=100)
    state: str = Field(..., min_length=2, max_length=100)
    company: Optional[str] = Field(None, max_length=255)
    specialization_ids: List[str] = Field(..., min_length=1, max_length=3)

    @field_validator("specialization_ids")
    @classmethod
    def validate_specialization_ids(cls, v: List[str]) -> List[str]:
        return [_ensure_uuid(item) for item in v]


class OnboardingResultResponse(CamelModel):
    client_id: str
    account_id: str
    specialization_count: int
    onboarding_completed: bool

    @classmethod
    def from_result(cls, result: CompleteOnboardingResult) -> "OnboardingResultResponse":
        return cls(**result.model_dump())


class LocationResponse(CamelModel):
    country: str
    state: str


class ClientProfileResponse(CamelModel):
    id: str
    account_id: str
    display_name: str
    phone_number: Optional[str] = None
    location: LocationResponse
    company: Optional[str] = None
    specialization_ids: List[str]
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: ClientProfile) -> "ClientProfileResponse":
        return cls(
            id=profile.id,
            account_id=profile.account_id,
            display_name=profile.display_name,
            phone_number=profile.phone_number,
            location=LocationResponse(country=profile.location.country, state=profile.location.state),
            company=profile.company,
            specialization_ids=list(profile.specialization_ids),
            onboarding_completed=profile.onboarding_completed,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class UpdateClientProfileRequest(CamelModel):
    display_name: Optional[str] = Field(None, min_length=2, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=32)
    company: Optional[str] = Field(None, max_length=255)
    country: Optional[str] = Field(None, min_length=2, max_length=100)
    state: Optional[str] = Field(None, min_length=2, max_length=100)


class AddSpecializationRequest(CamelModel):
    specialization_id: str

    @field_validator("specialization_id")
    @classmethod
    def validate_specialization_id(cls, v: str) -> str:
        return _ensure_uuid(v)
