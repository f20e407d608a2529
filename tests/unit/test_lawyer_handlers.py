"""
Unit tests for the lawyer onboarding handlers.
"""
from datetime import date

import pytest

from lawmarket.modules.lawyers.application.commands.save_lawyer_credentials import (
    AddLawyerDocumentsCommand,
    DocumentInput,
    SaveLawyerCredentialsCommand,
)
from lawmarket.modules.lawyers.application.commands.save_lawyer_specializations import (
    SaveLawyerSpecializationsCommand,
    SpecializationInput,
)
from lawmarket.modules.lawyers.application.commands.start_lawyer_onboarding import StartLawyerOnboardingCommand
from lawmarket.modules.lawyers.application.commands.submit_lawyer_application import SubmitLawyerApplicationCommand
from lawmarket.modules.lawyers.application.handlers.command_handlers import (
    AddLawyerDocumentsCommandHandler,
    SaveLawyerCredentialsCommandHandler,
    SaveLawyerSpecializationsCommandHandler,
    StartLawyerOnboardingCommandHandler,
    SubmitLawyerApplicationCommandHandler,
)
from lawmarket.modules.lawyers.application.handlers.query_handlers import GetMyLawyerProfileQueryHandler
from lawmarket.modules.lawyers.application.queries.get_lawyer_profile import GetMyLawyerProfileQuery
from lawmarket.modules.lawyers.domain.events.handlers import register_event_handlers
from lawmarket.modules.lawyers.domain.models.value_objects import OnboardingStep
from lawmarket.modules.lawyers.domain.services.lawyer_domain_service import LawyerDomainService
from lawmarket.shared.core.exceptions import (
    BarNumberAlreadyRegisteredError,
    IncompleteOnboardingError,
    InvalidOnboardingStepError,
    LawyerProfileAlreadyExistsError,
    LawyerProfileNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from tests.fixtures import CRIMINAL_LAW_ID, FAMILY_LAW_ID, UNKNOWN_SPECIALIZATION_ID

BAR_NUMBER = "NBA-12345"


def start_command(account_id="account-1", **overrides) -> StartLawyerOnboardingCommand:
    values = dict(
        account_id=account_id,
        email=f"{account_id}@lawfirm.com",
        email_verified=True,
        first_name="Lou",
        last_name="Lawyer",
        phone_number="+2348012345678",
        country="Nigeria",
    )
    values.update(overrides)
    return StartLawyerOnboardingCommand(**values)


def credentials_command(account_id="account-1", bar_number=BAR_NUMBER, with_document=True):
    documents = []
    if with_document:
        documents.append(DocumentInput(
            document_type="bar_certificate",
            url="https://files.example.com/cert.pdf",
            public_id="docs/cert",
        ))
    return SaveLawyerCredentialsCommand(
        account_id=account_id,
        bar_number=bar_number,
        issue_date=date(2015, 6, 1),
        law_school="University of Lagos",
        graduation_year=2014,
        documents=documents,
    )


def specializations_command(account_id="account-1", primary_id=FAMILY_LAW_ID):
    return SaveLawyerSpecializationsCommand(
        account_id=account_id,
        primary=[SpecializationInput(specialization_id=primary_id, years_of_experience=6)],
        secondary=[SpecializationInput(specialization_id=CRIMINAL_LAW_ID, years_of_experience=2)],
        language_ids=["en"],
    )


class Flow:
    """Wires every lawyer handler against the same in-memory state."""

    def __init__(self, lawyer_repository, specialization_repository, publisher):
        self.repository = lawyer_repository
        self.publisher = publisher
        service = LawyerDomainService(lawyer_repository, specialization_repository)
        self.start = StartLawyerOnboardingCommandHandler(lawyer_repository, service, publisher)
        self.credentials = SaveLawyerCredentialsCommandHandler(lawyer_repository, service, publisher)
        self.documents = AddLawyerDocumentsCommandHandler(lawyer_repository, publisher)
        self.specializations = SaveLawyerSpecializationsCommandHandler(lawyer_repository, service, publisher)
        self.submit = SubmitLawyerApplicationCommandHandler(lawyer_repository, publisher)
        self.me = GetMyLawyerProfileQueryHandler(lawyer_repository)

    async def stored_step(self, account_id="account-1") -> OnboardingStep:
        return (await self.repository.find_by_account_id(account_id)).onboarding_step


@pytest.fixture
def flow(lawyer_repository, specialization_repository, publisher):
    return Flow(lawyer_repository, specialization_repository, publisher)


class TestStartLawyerOnboarding:
    @pytest.mark.asyncio
    async def test_start_creates_profile(self, flow):
        profile = await flow.start.handle(start_command())

        assert profile.onboarding_step == OnboardingStep.BASIC_INFO
        assert flow.repository.save_calls == 1
        assert flow.publisher.event_types == ["lawyer.profile_created"]

    @pytest.mark.asyncio
    async def test_unverified_email(self, flow):
        with pytest.raises(UnauthorizedError):
            await flow.start.handle(start_command(email_verified=False))
        assert flow.repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_second_start_conflicts(self, flow):
        await flow.start.handle(start_command())

        with pytest.raises(LawyerProfileAlreadyExistsError):
            await flow.start.handle(start_command())
        assert flow.repository.save_calls == 1


class TestLawyerCredentials:
    @pytest.mark.asyncio
    async def test_credentials_without_profile(self, flow):
        with pytest.raises(LawyerProfileNotFoundError):
            await flow.credentials.handle(credentials_command())

    @pytest.mark.asyncio
    async def test_credentials_advance_step(self, flow):
        await flow.start.handle(start_command())

        profile = await flow.credentials.handle(credentials_command())

        assert profile.onboarding_step == OnboardingStep.CREDENTIALS
        assert await flow.stored_step() == OnboardingStep.CREDENTIALS
        assert len((await flow.repository.find_by_account_id("account-1")).documents) == 1

    @pytest.mark.asyncio
    async def test_bar_number_already_registered(self, flow):
        await flow.start.handle(start_command("account-1"))
        await flow.credentials.handle(credentials_command("account-1"))
        await flow.start.handle(start_command("account-2"))

        with pytest.raises(BarNumberAlreadyRegisteredError) as exc_info:
            await flow.credentials.handle(credentials_command("account-2", bar_number=f"  {BAR_NUMBER} "))

        assert exc_info.value.status_code == 409
        assert await flow.stored_step("account-2") == OnboardingStep.BASIC_INFO

    @pytest.mark.asyncio
    async def test_credentials_twice(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())

        with pytest.raises(InvalidOnboardingStepError):
            await flow.credentials.handle(credentials_command(bar_number="NBA-99999"))

    @pytest.mark.asyncio
    async def test_repeated_credentials_with_same_bar_number(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())

        with pytest.raises(InvalidOnboardingStepError) as exc_info:
            await flow.credentials.handle(credentials_command())

        assert exc_info.value.status_code == 409
        assert exc_info.value.details["current_step"] == "credentials"
        assert await flow.stored_step() == OnboardingStep.CREDENTIALS


class TestLawyerDocuments:
    @pytest.mark.asyncio
    async def test_documents_are_appended(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())

        await flow.documents.handle(AddLawyerDocumentsCommand(
            account_id="account-1",
            documents=[DocumentInput(document_type="law_degree", url="https://f.test/d.pdf", public_id="docs/d")],
        ))

        stored = await flow.repository.find_by_account_id("account-1")
        assert [d.document_type.value for d in stored.documents] == ["bar_certificate", "law_degree"]

    @pytest.mark.asyncio
    async def test_documents_before_credentials(self, flow):
        await flow.start.handle(start_command())

        with pytest.raises(InvalidOnboardingStepError):
            await flow.documents.handle(AddLawyerDocumentsCommand(
                account_id="account-1",
                documents=[DocumentInput(document_type="other", url="https://f.test/o.pdf", public_id="docs/o")],
            ))

    @pytest.mark.asyncio
    async def test_invalid_document_type(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())

        with pytest.raises(ValidationError, match="Invalid document type"):
            await flow.documents.handle(AddLawyerDocumentsCommand(
                account_id="account-1",
                documents=[DocumentInput(document_type="selfie", url="https://f.test/s.png", public_id="docs/s")],
            ))


class TestLawyerSpecializations:
    @pytest.mark.asyncio
    async def test_unknown_specialization_is_named(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())

        with pytest.raises(ValidationError) as exc_info:
            await flow.specializations.handle(specializations_command(primary_id=UNKNOWN_SPECIALIZATION_ID))

        assert exc_info.value.invalid_ids == [UNKNOWN_SPECIALIZATION_ID]
        assert await flow.stored_step() == OnboardingStep.CREDENTIALS

    @pytest.mark.asyncio
    async def test_specializations_before_credentials(self, flow):
        await flow.start.handle(start_command())

        with pytest.raises(InvalidOnboardingStepError):
            await flow.specializations.handle(specializations_command())
        assert await flow.stored_step() == OnboardingStep.BASIC_INFO


class TestLawyerSubmission:
    @pytest.mark.asyncio
    async def test_full_flow_notifies_admins(self, flow):
        register_event_handlers(flow.publisher)
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())
        await flow.specializations.handle(specializations_command())

        profile = await flow.submit.handle(SubmitLawyerApplicationCommand(account_id="account-1"))

        assert profile.onboarding_step == OnboardingStep.SUBMITTED
        assert profile.profile_completed is True
        assert flow.publisher.event_types[-1] == "lawyer.application_submitted"
        assert flow.publisher.failed_count == 0

        mine = await flow.me.handle(GetMyLawyerProfileQuery(account_id="account-1"))
        assert mine.is_onboarding_complete is True

    @pytest.mark.asyncio
    async def test_submit_too_early(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command())

        with pytest.raises(IncompleteOnboardingError):
            await flow.submit.handle(SubmitLawyerApplicationCommand(account_id="account-1"))
        assert await flow.stored_step() == OnboardingStep.CREDENTIALS

    @pytest.mark.asyncio
    async def test_submit_without_documents(self, flow):
        await flow.start.handle(start_command())
        await flow.credentials.handle(credentials_command(with_document=False))
        await flow.specializations.handle(specializations_command())

        with pytest.raises(IncompleteOnboardingError, match="At least one document is required"):
            await flow.submit.handle(SubmitLawyerApplicationCommand(account_id="account-1"))

        stored = await flow.repository.find_by_account_id("account-1")
        assert stored.onboarding_step == OnboardingStep.SPECIALIZATIONS
        assert stored.profile_completed is False

    @pytest.mark.asyncio
    async def test_get_my_profile_without_onboarding(self, flow):
        with pytest.raises(LawyerProfileNotFoundError):
            await flow.me.handle(GetMyLawyerProfileQuery(account_id="nobody"))
