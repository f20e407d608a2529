# 📄 File: lawmarket/modules/lawyers/presentation/api/schemas/lawyer_schemas.py
# 🧭 Purpose (Layman Explanation):
# What each lawyer sign-up form and the lawyer application look like on the web API.
#
# 🧪 Purpose (Technical Summary):
# Request/response models for the lawyer onboarding routes, with camelCase aliases. Request
# models check shape only; step order and business limits are enforced by the aggregate.
#
# 🔗 Dependencies:
# pydantic, lawmarket.shared.core.schemas
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers.presentation.api.v1.lawyers

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.models.value_objects import (
    ApplicationStatus,
    DocumentType,
    LawyerDocument,
    LawyerSpecialization,
    OnboardingStep,
    SpecializationKind,
)
from lawmarket.shared.core.schemas import CamelModel


# =========================================================================
# REQUESTS
# =========================================================================

class StartLawyerOnboardingRequest(CamelModel):
    first_name: str = Field(..., min_length=2, max_length=100)
    middle_name: Optional[str] = Field(None, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    phone_number: str = Field(..., min_length=10, max_length=32)
    country: str = Field(..., min_length=2, max_length=100)


class DocumentRequest(CamelModel):
    type: DocumentType
    url: str = Field(..., min_length=1)
    public_id: str = Field(..., min_length=1, max_length=255)
    original_name: Optional[str] = Field(None, max_length=255)
    file_size: Optional[int] = Field(None, ge=0)
    mime_type: Optional[str] = Field(None, max_length=100)


class SaveCredentialsRequest(CamelModel):
    bar_number: str = Field(..., min_length=5, max_length=64)
    bar_association: Optional[str] = Field(None, max_length=255)
    issue_date: date
    expiry_date: Optional[date] = None
    law_school: str = Field(..., min_length=3, max_length=255)
    graduation_year: int
    current_firm: Optional[str] = Field(None, max_length=255)
    documents: List[DocumentRequest] = Field(default_factory=list)


class AddDocumentsRequest(CamelModel):
    documents: List[DocumentRequest] = Field(..., min_length=1)


class SpecializationChoiceRequest(CamelModel):
    specialization_id: str
    years_of_experience: int = Field(0, ge=0, le=80)


class SaveSpecializationsRequest(CamelModel):
    primary: List[SpecializationChoiceRequest] = Field(default_factory=list, max_length=5)
    secondary: List[SpecializationChoiceRequest] = Field(default_factory=list, max_length=3)
    language_ids: List[str] = Field(..., min_length=1)


# =========================================================================
# RESPONSES
# =========================================================================

class DocumentResponse(CamelModel):
    id: str
    type: DocumentType
    url: str
    public_id: str
    original_name: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None

    @classmethod
    def from_domain(cls, document: LawyerDocument) -> "DocumentResponse":
        return cls(
            id=document.id,
            type=document.document_type,
            url=document.url,
            public_id=document.public_id,
            original_name=document.original_name,
            file_size=document.file_size,
            mime_type=document.mime_type,
        )


class SpecializationResponse(CamelModel):
    specialization_id: str
    kind: SpecializationKind
    years_of_experience: int

    @classmethod
    def from_domain(cls, specialization: LawyerSpecialization) -> "SpecializationResponse":
        return cls(
            specialization_id=specialization.specialization_id,
            kind=specialization.kind,
            years_of_experience=specialization.years_of_experience,
        )


class BarCredentialsResponse(CamelModel):
    bar_number: str
    bar_association: Optional[str] = None
    issue_date: date
    expiry_date: Optional[date] = None


class EducationResponse(CamelModel):
    law_school: str
    graduation_year: int
    years_since_graduation: int


class LawyerProfileResponse(CamelModel):
    id: str
    account_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    full_name: str
    email: str
    phone_number: str
    country: str
    bar_credentials: Optional[BarCredentialsResponse] = None
    education: Optional[EducationResponse] = None
    current_firm: Optional[str] = None
    onboarding_step: OnboardingStep
    application_status: ApplicationStatus
    profile_completed: bool
    documents: List[DocumentResponse]
    specializations: List[SpecializationResponse]
    language_ids: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: LawyerProfile) -> "LawyerProfileResponse":
        credentials = profile.bar_credentials
        education = profile.education
        return cls(
            id=profile.id,
            account_id=profile.account_id,
            first_name=profile.first_name,
            middle_name=profile.middle_name,
            last_name=profile.last_name,
            full_name=profile.full_name,
            email=profile.email,
            phone_number=profile.phone_number,
            country=profile.country,
            bar_credentials=BarCredentialsResponse(**credentials.model_dump()) if credentials else None,
            education=EducationResponse(
                law_school=education.law_school,
                graduation_year=education.graduation_year,
                years_since_graduation=education.years_since_graduation,
            ) if education else None,
            current_firm=profile.current_firm,
            onboarding_step=profile.onboarding_step,
            application_status=profile.application_status,
            profile_completed=profile.profile_completed,
            documents=[DocumentResponse.from_domain(doc) for doc in profile.documents],
            specializations=[SpecializationResponse.from_domain(spec) for spec in profile.specializations],
            language_ids=list(profile.language_ids),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
