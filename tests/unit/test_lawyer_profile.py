"""
Unit tests for the LawyerProfile onboarding state machine.

basic_info -> credentials -> specializations -> submitted, one step at a
time; a rejected transition leaves the profile unchanged.
"""
from datetime import date

import pytest

from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.models.value_objects import (
    ApplicationStatus,
    LawyerDocument,
    OnboardingStep,
)
from lawmarket.shared.core.exceptions import (
    IncompleteOnboardingError,
    InvalidOnboardingStepError,
    ValidationError,
)
from lawmarket.shared.domain.entity import pull_events
from lawmarket.shared.utils.helpers import utc_now
from tests.fixtures import CORPORATE_LAW_ID, CRIMINAL_LAW_ID, FAMILY_LAW_ID


def new_lawyer(**overrides) -> LawyerProfile:
    values = dict(
        account_id="account-1",
        first_name="Lou",
        last_name="Lawyer",
        email="Lou@LawFirm.com",
        phone_number="+2348012345678",
        country="Nigeria",
    )
    values.update(overrides)
    return LawyerProfile.create(**values)


def document(document_type="bar_certificate") -> LawyerDocument:
    return LawyerDocument.create(
        document_type=document_type,
        url=f"https://files.example.com/{document_type}.pdf",
        public_id=f"docs/{document_type}",
    )


def with_credentials(profile: LawyerProfile, documents=None) -> LawyerProfile:
    profile.save_credentials(
        bar_number="NBA-12345",
        issue_date=date(2015, 6, 1),
        law_school="University of Lagos",
        graduation_year=2014,
        documents=documents,
    )
    return profile


def with_specializations(profile: LawyerProfile) -> LawyerProfile:
    profile.save_specializations(
        primary=[(FAMILY_LAW_ID, 5)],
        secondary=[(CRIMINAL_LAW_ID, 2)],
        language_ids=["en", "yo"],
    )
    return profile


class TestLawyerProfileCreation:
    def test_create_starts_at_basic_info(self):
        profile = new_lawyer(middle_name=" Ade ")

        assert profile.onboarding_step == OnboardingStep.BASIC_INFO
        assert profile.application_status == ApplicationStatus.PENDING
        assert profile.profile_completed is False
        assert profile.email == "lou@lawfirm.com"
        assert profile.full_name == "Lou Ade Lawyer"
        assert [e.event_type for e in pull_events(profile.meta)] == ["lawyer.profile_created"]

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"account_id": ""}, "User ID is required"),
            ({"first_name": "L"}, "First name must be at least 2 characters"),
            ({"last_name": " "}, "Last name must be at least 2 characters"),
            ({"phone_number": "12345"}, "Invalid phone number"),
            ({"email": "not-an-email"}, "Invalid email format"),
            ({"country": "  "}, "Country is required"),
        ],
    )
    def test_invalid_basic_info_is_rejected(self, overrides, message):
        with pytest.raises(ValidationError, match=message):
            new_lawyer(**overrides)


class TestCredentialsStep:
    def test_save_credentials_advances_step(self):
        profile = new_lawyer()
        pull_events(profile.meta)

        with_credentials(profile, documents=[document()])

        assert profile.onboarding_step == OnboardingStep.CREDENTIALS
        assert profile.bar_credentials.bar_number == "NBA-12345"
        assert profile.education.graduation_year == 2014
        assert len(profile.documents) == 1
        event = pull_events(profile.meta)[0]
        assert event.event_type == "lawyer.onboarding_step_completed"
        assert event.step == "credentials"
        assert event.next_step == "specializations"

    def test_credentials_twice_is_rejected(self):
        profile = with_credentials(new_lawyer())

        with pytest.raises(InvalidOnboardingStepError) as exc_info:
            with_credentials(profile)
        assert exc_info.value.status_code == 409
        assert exc_info.value.current_step == "credentials"

    def test_invalid_credentials_leave_step_unchanged(self):
        profile = new_lawyer()

        with pytest.raises(ValidationError):
            profile.save_credentials(
                bar_number="NBA-12345",
                issue_date=date(2015, 6, 1),
                law_school="UL",
                graduation_year=2014,
            )
        assert profile.onboarding_step == OnboardingStep.BASIC_INFO
        assert profile.bar_credentials is None


class TestDocuments:
    def test_documents_rejected_before_credentials(self):
        profile = new_lawyer()

        with pytest.raises(InvalidOnboardingStepError):
            profile.attach_documents([document()])

    def test_documents_append_during_credentials_and_specializations(self):
        profile = with_credentials(new_lawyer(), documents=[document()])
        profile.attach_documents([document("law_degree")])
        with_specializations(profile)
        profile.attach_documents([document("professional_id")])

        assert [d.document_type.value for d in profile.documents] == [
            "bar_certificate",
            "law_degree",
            "professional_id",
        ]

    def test_empty_document_list_is_rejected(self):
        profile = with_credentials(new_lawyer())

        with pytest.raises(ValidationError, match="At least one document is required"):
            profile.attach_documents([])


class TestSpecializationsStep:
    def test_save_specializations_advances_step(self):
        profile = with_specializations(with_credentials(new_lawyer()))

        assert profile.onboarding_step == OnboardingStep.SPECIALIZATIONS
        assert [s.specialization_id for s in profile.primary_specializations] == [FAMILY_LAW_ID]
        assert [s.specialization_id for s in profile.secondary_specializations] == [CRIMINAL_LAW_ID]
        assert profile.language_ids == ["en", "yo"]

    def test_specializations_before_credentials_is_rejected(self):
        profile = new_lawyer()

        with pytest.raises(InvalidOnboardingStepError, match="Complete credentials first"):
            with_specializations(profile)
        assert profile.specializations == []

    def test_too_many_primary_is_rejected(self):
        profile = with_credentials(new_lawyer())

        with pytest.raises(ValidationError, match="Maximum 5 primary specializations allowed"):
            profile.save_specializations(
                primary=[(f"spec-{i}", 1) for i in range(6)],
                secondary=[],
                language_ids=["en"],
            )

    def test_too_many_secondary_is_rejected(self):
        profile = with_credentials(new_lawyer())

        with pytest.raises(ValidationError, match="Maximum 3 secondary specializations allowed"):
            profile.save_specializations(
                primary=[],
                secondary=[(f"spec-{i}", 1) for i in range(4)],
                language_ids=["en"],
            )

    def test_language_is_required(self):
        profile = with_credentials(new_lawyer())

        with pytest.raises(ValidationError, match="At least one language is required"):
            profile.save_specializations(primary=[(FAMILY_LAW_ID, 1)], secondary=[], language_ids=[])

    def test_same_specialization_in_both_lists_is_rejected(self):
        profile = with_credentials(new_lawyer())

        with pytest.raises(ValidationError, match="cannot be selected more than once"):
            profile.save_specializations(
                primary=[(FAMILY_LAW_ID, 3)],
                secondary=[(FAMILY_LAW_ID, 1)],
                language_ids=["en"],
            )
        assert profile.onboarding_step == OnboardingStep.CREDENTIALS

    def test_duplicate_languages_collapse(self):
        profile = with_credentials(new_lawyer())
        profile.save_specializations(
            primary=[(CORPORATE_LAW_ID, 0)],
            secondary=[],
            language_ids=["en", "fr", "en"],
        )
        assert profile.language_ids == ["en", "fr"]


class TestSubmission:
    def test_submit_completes_profile(self):
        profile = with_specializations(with_credentials(new_lawyer(), documents=[document()]))
        pull_events(profile.meta)

        profile.submit_for_review()

        assert profile.onboarding_step == OnboardingStep.SUBMITTED
        assert profile.profile_completed is True
        assert profile.is_onboarding_complete is True
        event = pull_events(profile.meta)[0]
        assert event.event_type == "lawyer.application_submitted"
        assert event.lawyer_name == "Lou Lawyer"
        assert event.email == "lou@lawfirm.com"

    def test_submit_before_all_steps_is_rejected(self):
        profile = with_credentials(new_lawyer(), documents=[document()])

        with pytest.raises(IncompleteOnboardingError, match="Complete all onboarding steps first"):
            profile.submit_for_review()
        assert profile.onboarding_step == OnboardingStep.CREDENTIALS
        assert profile.profile_completed is False

    def test_submit_without_documents_is_rejected(self):
        profile = with_specializations(with_credentials(new_lawyer()))

        with pytest.raises(IncompleteOnboardingError) as exc_info:
            profile.submit_for_review()
        assert exc_info.value.details["missing"] == "documents"
        assert profile.onboarding_step == OnboardingStep.SPECIALIZATIONS
        assert profile.profile_completed is False

    def test_submit_twice_is_rejected(self):
        profile = with_specializations(with_credentials(new_lawyer(), documents=[document()]))
        profile.submit_for_review()

        with pytest.raises(IncompleteOnboardingError):
            profile.submit_for_review()

    def test_submit_without_specializations_is_rejected(self):
        profile = with_credentials(new_lawyer(), documents=[document()])
        profile.save_specializations(primary=[], secondary=[], language_ids=["en"])

        with pytest.raises(IncompleteOnboardingError) as exc_info:
            profile.submit_for_review()
        assert exc_info.value.details["missing"] == "specializations"
        assert profile.onboarding_step == OnboardingStep.SPECIALIZATIONS
        assert profile.profile_completed is False

    def test_submit_without_bar_credentials_is_rejected(self):
        source = with_specializations(with_credentials(new_lawyer(), documents=[document()]))
        profile = LawyerProfile.reconstitute(
            profile_id=source.id,
            account_id=source.account_id,
            first_name=source.first_name,
            middle_name=None,
            last_name=source.last_name,
            email=source.email,
            phone_number=source.phone_number,
            country=source.country,
            bar_credentials=None,
            education=source.education,
            current_firm=None,
            onboarding_step=OnboardingStep.SPECIALIZATIONS,
            application_status=ApplicationStatus.PENDING,
            profile_completed=False,
            documents=source.documents,
            specializations=source.specializations,
            language_ids=source.language_ids,
            created_at=utc_now(),
        )

        with pytest.raises(IncompleteOnboardingError) as exc_info:
            profile.submit_for_review()
        assert exc_info.value.details["missing"] == "credentials"
        assert profile.onboarding_step == OnboardingStep.SPECIALIZATIONS
