# 📄 File: lawmarket/modules/lawyers/domain/models/value_objects.py
# 🧭 Purpose (Layman Explanation):
# The pieces that make up a lawyer's application: bar registration, law degree, uploaded
# documents and chosen practice areas, each checked when it is created.
#
# 🧪 Purpose (Technical Summary):
# Frozen pydantic value objects and enums for the LawyerProfile aggregate. Every value object
# validates in create and raises ValidationError with a user-facing message.
#
# 🔗 Dependencies:
# pydantic, lawmarket.shared.core.exceptions, lawmarket.shared.utils.helpers
#
# 🔄 Connected Modules / Calls From:
# LawyerProfile aggregate, lawyer repository mappers, lawyer command handlers

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from lawmarket.shared.core.exceptions import ValidationError
from lawmarket.shared.utils.helpers import generate_id, utc_now

MIN_BAR_NUMBER_LENGTH = 5
MIN_LAW_SCHOOL_LENGTH = 3
MIN_GRADUATION_YEAR = 1900


class OnboardingStep(str, Enum):
    """Linear lawyer onboarding steps; no skipping and no going back."""
    BASIC_INFO = "basic_info"
    CREDENTIALS = "credentials"
    SPECIALIZATIONS = "specializations"
    SUBMITTED = "submitted"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    REVISION = "revision"


class DocumentType(str, Enum):
    BAR_CERTIFICATE = "bar_certificate"
    LAW_DEGREE = "law_degree"
    PROFESSIONAL_ID = "professional_id"
    OTHER = "other"


class SpecializationKind(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class BarCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    bar_number: str
    bar_association: Optional[str] = None
    issue_date: date
    expiry_date: Optional[date] = None

    @classmethod
    def create(
        cls,
        bar_number: str,
        issue_date: Optional[date],
        bar_association: Optional[str] = None,
        expiry_date: Optional[date] = None,
    ) -> "BarCredentials":
        number = (bar_number or "").strip()
        if len(number) < MIN_BAR_NUMBER_LENGTH:
            raise ValidationError("Bar number must be at least 5 characters", field="bar_number")
        if issue_date is None:
            raise ValidationError("Issue date is required", field="issue_date")
        if expiry_date is not None and expiry_date < issue_date:
            raise ValidationError("Expiry date cannot be before issue date", field="expiry_date")

        return cls(
            bar_number=number,
            bar_association=(bar_association or "").strip() or None,
            issue_date=issue_date,
            expiry_date=expiry_date,
        )


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    law_school: str
    graduation_year: int

    @classmethod
    def create(cls, law_school: str, graduation_year: int) -> "Education":
        school = (law_school or "").strip()
        if len(school) < MIN_LAW_SCHOOL_LENGTH:
            raise ValidationError("Law school name must be at least 3 characters", field="law_school")
        if graduation_year > utc_now().year:
            raise ValidationError("Graduation year cannot be in the future", field="graduation_year")
        if graduation_year < MIN_GRADUATION_YEAR:
            raise ValidationError("Invalid graduation year", field="graduation_year")
        return cls(law_school=school, graduation_year=graduation_year)

    @property
    def years_since_graduation(self) -> int:
        return utc_now().year - self.graduation_year


class LawyerDocument(BaseModel):
    """An uploaded verification file; the binary itself lives in external storage."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    document_type: DocumentType
    url: str
    public_id: str
    original_name: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None

    @classmethod
    def create(
        cls,
        document_type: str,
        url: str,
        public_id: str,
        original_name: Optional[str] = None,
        file_size: Optional[int] = None,
        mime_type: Optional[str] = None,
    ) -> "LawyerDocument":
        try:
            kind = DocumentType(document_type)
        except ValueError as e:
            allowed = ", ".join(t.value for t in DocumentType)
            raise ValidationError(
                f"Invalid document type: {document_type}. Must be one of: {allowed}",
                field="document_type",
                value=document_type,
            ) from e
        if not url or not url.strip():
            raise ValidationError("Document URL is required", field="url")
        if not public_id or not public_id.strip():
            raise ValidationError("Document public ID is required", field="public_id")
        if file_size is not None and file_size < 0:
            raise ValidationError("File size cannot be negative", field="file_size")

        return cls(
            document_type=kind,
            url=url.strip(),
            public_id=public_id.strip(),
            original_name=original_name,
            file_size=file_size,
            mime_type=mime_type,
        )


class LawyerSpecialization(BaseModel):
    model_config = ConfigDict(frozen=True)

    specialization_id: str
    kind: SpecializationKind
    years_of_experience: int = 0

    @classmethod
    def create(cls, specialization_id: str, kind: SpecializationKind, years_of_experience: int = 0) -> "LawyerSpecialization":
        if not specialization_id:
            raise ValidationError("Specialization ID is required", field="specialization_id")
        if years_of_experience < 0:
            raise ValidationError("Years of experience cannot be negative", field="years_of_experience")
        return cls(specialization_id=specialization_id, kind=kind, years_of_experience=years_of_experience)
