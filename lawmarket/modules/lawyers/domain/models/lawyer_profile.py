# 📄 File: lawmarket/modules/lawyers/domain/models/lawyer_profile.py
# 🧭 Purpose (Layman Explanation):
# A lawyer's application to join the marketplace. It is filled in over several steps (personal
# details, credentials, practice areas) and then sent to the admins for review.
#
# 🧪 Purpose (Technical Summary):
# LawyerProfile aggregate root implementing the linear onboarding state machine
# basic_info -> credentials -> specializations -> submitted. Each transition checks the current
# step, validates through value objects and records a step-completed event.
#
# 🔗 Dependencies:
# pydantic, lawyer value objects and events, lawmarket.shared.domain.entity, Email
#
# 🔄 Connected Modules / Calls From:
# LawyerProfileRepository, LawyerDomainService, lawyer command handlers

"""
LawyerProfile aggregate

Invariants:
- onboarding_step only ever moves one step forward
- a failed transition leaves every field untouched
- profile_completed is True exactly when the application was submitted
- a specialization id appears at most once across primary and secondary
"""

from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel

from lawmarket.modules.lawyers.domain.events.lawyer_events import (
    LawyerApplicationSubmitted,
    LawyerOnboardingStepCompleted,
    LawyerProfileCreated,
)
from lawmarket.modules.lawyers.domain.models.value_objects import (
    ApplicationStatus,
    BarCredentials,
    Education,
    LawyerDocument,
    LawyerSpecialization,
    OnboardingStep,
    SpecializationKind,
)
from lawmarket.shared.core.exceptions import (
    IncompleteOnboardingError,
    InvalidOnboardingStepError,
    ValidationError,
)
from lawmarket.shared.domain.entity import (
    EntityMetadata,
    new_metadata,
    record_event,
    restore_metadata,
    touch,
)
from lawmarket.shared.domain.value_objects import Email

MIN_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10
MAX_PRIMARY_SPECIALIZATIONS = 5
MAX_SECONDARY_SPECIALIZATIONS = 3

# (specialization_id, years_of_experience)
SpecializationChoice = Tuple[str, int]

DOCUMENT_STEPS = (OnboardingStep.CREDENTIALS, OnboardingStep.SPECIALIZATIONS)


def _validate_name(value: Optional[str], label: str, field: str) -> str:
    name = (value or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(f"{label} must be at least 2 characters", field=field)
    return name


class LawyerProfile(BaseModel):
    meta: EntityMetadata
    account_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    email: str
    phone_number: str
    country: str
    bar_credentials: Optional[BarCredentials] = None
    education: Optional[Education] = None
    current_firm: Optional[str] = None
    onboarding_step: OnboardingStep = OnboardingStep.BASIC_INFO
    application_status: ApplicationStatus = ApplicationStatus.PENDING
    profile_completed: bool = False
    documents: List[LawyerDocument] = []
    specializations: List[LawyerSpecialization] = []
    language_ids: List[str] = []

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def create(
        cls,
        account_id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone_number: str,
        country: str,
        middle_name: Optional[str] = None,
        profile_id: Optional[str] = None,
    ) -> "LawyerProfile":
        """
        Start a lawyer application at the basic_info step.

        Raises:
            ValidationError: On short names, a phone number under 10
                characters, a malformed email or a blank country
        """
        if not account_id or not account_id.strip():
            raise ValidationError("User ID is required", field="account_id")
        first = _validate_name(first_name, "First name", "first_name")
        last = _validate_name(last_name, "Last name", "last_name")
        phone = (phone_number or "").strip()
        if len(phone) < MIN_PHONE_LENGTH:
            raise ValidationError("Invalid phone number", field="phone_number")
        email_vo = Email.create(email)
        country_value = (country or "").strip()
        if not country_value:
            raise ValidationError("Country is required", field="country")

        profile = cls(
            meta=new_metadata(profile_id),
            account_id=account_id,
            first_name=first,
            middle_name=(middle_name or "").strip() or None,
            last_name=last,
            email=email_vo.value,
            phone_number=phone,
            country=country_value,
            onboarding_step=OnboardingStep.BASIC_INFO,
            application_status=ApplicationStatus.PENDING,
            profile_completed=False,
            documents=[],
            specializations=[],
            language_ids=[],
        )
        record_event(profile.meta, LawyerProfileCreated(
            aggregate_id=profile.id,
            account_id=account_id,
            email=profile.email,
            full_name=profile.full_name,
        ))
        return profile

    @classmethod
    def reconstitute(
        cls,
        profile_id: str,
        account_id: str,
        first_name: str,
        middle_name: Optional[str],
        last_name: str,
        email: str,
        phone_number: str,
        country: str,
        bar_credentials: Optional[BarCredentials],
        education: Optional[Education],
        current_firm: Optional[str],
        onboarding_step: OnboardingStep,
        application_status: ApplicationStatus,
        profile_completed: bool,
        documents: Sequence[LawyerDocument],
        specializations: Sequence[LawyerSpecialization],
        language_ids: Sequence[str],
        created_at: datetime,
        updated_at: Optional[datetime] = None,
    ) -> "LawyerProfile":
        return cls(
            meta=restore_metadata(profile_id, created_at, updated_at),
            account_id=account_id,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            country=country,
            bar_credentials=bar_credentials,
            education=education,
            current_firm=current_firm,
            onboarding_step=onboarding_step,
            application_status=application_status,
            profile_completed=profile_completed,
            documents=list(documents),
            specializations=list(specializations),
            language_ids=list(language_ids),
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
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)

    @property
    def is_onboarding_complete(self) -> bool:
        return self.onboarding_step == OnboardingStep.SUBMITTED and self.profile_completed

    @property
    def is_approved(self) -> bool:
        return self.application_status == ApplicationStatus.APPROVED

    @property
    def primary_specializations(self) -> List[LawyerSpecialization]:
        return [s for s in self.specializations if s.kind == SpecializationKind.PRIMARY]

    @property
    def secondary_specializations(self) -> List[LawyerSpecialization]:
        return [s for s in self.specializations if s.kind == SpecializationKind.SECONDARY]

    # =========================================================================
    # STEP 2: CREDENTIALS
    # =========================================================================

    def ensure_can_save_credentials(self) -> None:
        if self.onboarding_step != OnboardingStep.BASIC_INFO:
            raise InvalidOnboardingStepError(
                "Cannot save credentials. Complete basic info first.",
                current_step=self.onboarding_step.value,
            )

    def save_credentials(
        self,
        bar_number: str,
        issue_date: Optional[date],
        law_school: str,
        graduation_year: int,
        bar_association: Optional[str] = None,
        expiry_date: Optional[date] = None,
        current_firm: Optional[str] = None,
        documents: Optional[Sequence[LawyerDocument]] = None,
    ) -> None:
        """
        Record bar admission and education, optionally with the first
        verification documents, and advance to the credentials step.

        Raises:
            InvalidOnboardingStepError: If not at the basic_info step
            ValidationError: If a credential or education value is invalid
        """
        self.ensure_can_save_credentials()

        bar_credentials = BarCredentials.create(
            bar_number=bar_number,
            issue_date=issue_date,
            bar_association=bar_association,
            expiry_date=expiry_date,
        )
        education = Education.create(law_school, graduation_year)

        self.bar_credentials = bar_credentials
        self.education = education
        self.current_firm = (current_firm or "").strip() or None
        if documents:
            self.documents = self.documents + list(documents)
        self._advance(OnboardingStep.CREDENTIALS, OnboardingStep.SPECIALIZATIONS)

    def attach_documents(self, documents: Sequence[LawyerDocument]) -> None:
        if self.onboarding_step not in DOCUMENT_STEPS:
            raise InvalidOnboardingStepError(
                "Documents can only be added during credentials or specializations step.",
                current_step=self.onboarding_step.value,
            )
        if not documents:
            raise ValidationError("At least one document is required", field="documents")

        self.documents = self.documents + list(documents)
        touch(self.meta)

    # =========================================================================
    # STEP 3: SPECIALIZATIONS
    # =========================================================================

    def save_specializations(
        self,
        primary: Sequence[SpecializationChoice],
        secondary: Sequence[SpecializationChoice],
        language_ids: Sequence[str],
    ) -> None:
        """
        Replace practice areas and languages, then advance to the
        specializations step.

        Raises:
            InvalidOnboardingStepError: If not at the credentials step
            ValidationError: Over 5 primary or 3 secondary entries, no
                language, or the same specialization chosen twice
        """
        if self.onboarding_step != OnboardingStep.CREDENTIALS:
            raise InvalidOnboardingStepError(
                "Cannot save specializations. Complete credentials first.",
                current_step=self.onboarding_step.value,
            )
        if len(primary) > MAX_PRIMARY_SPECIALIZATIONS:
            raise ValidationError("Maximum 5 primary specializations allowed", field="primary_specializations")
        if len(secondary) > MAX_SECONDARY_SPECIALIZATIONS:
            raise ValidationError("Maximum 3 secondary specializations allowed", field="secondary_specializations")
        languages = list(dict.fromkeys(language_ids))
        if not languages:
            raise ValidationError("At least one language is required", field="language_ids")

        specializations = [
            LawyerSpecialization.create(sid, SpecializationKind.PRIMARY, years) for sid, years in primary
        ] + [
            LawyerSpecialization.create(sid, SpecializationKind.SECONDARY, years) for sid, years in secondary
        ]
        ids = [s.specialization_id for s in specializations]
        if len(set(ids)) != len(ids):
            raise ValidationError("Specialization cannot be selected more than once", field="specializations")

        self.specializations = specializations
        self.language_ids = languages
        self._advance(OnboardingStep.SPECIALIZATIONS, OnboardingStep.SUBMITTED)

    # =========================================================================
    # STEP 4: SUBMISSION
    # =========================================================================

    def submit_for_review(self) -> None:
        """
        Raises:
            IncompleteOnboardingError: If a step is missing or the
                application lacks credentials, documents or specializations
        """
        if self.onboarding_step != OnboardingStep.SPECIALIZATIONS:
            raise IncompleteOnboardingError("Cannot submit. Complete all onboarding steps first.", missing="steps")
        if self.bar_credentials is None or self.education is None:
            raise IncompleteOnboardingError("Bar credentials and education are required", missing="credentials")
        if not self.documents:
            raise IncompleteOnboardingError("At least one document is required", missing="documents")
        if not self.specializations:
            raise IncompleteOnboardingError("At least one specialization is required", missing="specializations")

        self.onboarding_step = OnboardingStep.SUBMITTED
        self.profile_completed = True
        touch(self.meta)
        record_event(self.meta, LawyerApplicationSubmitted(
            aggregate_id=self.id,
            lawyer_name=self.full_name,
            email=self.email,
        ))

    def _advance(self, step: OnboardingStep, next_step: OnboardingStep) -> None:
        self.onboarding_step = step
        touch(self.meta)
        record_event(self.meta, LawyerOnboardingStepCompleted(
            aggregate_id=self.id,
            step=step.value,
            next_step=next_step.value,
        ))
