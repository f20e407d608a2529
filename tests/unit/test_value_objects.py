"""
Unit tests for value objects.

Email, Role, Location and the lawyer credential value objects validate
on construction and are immutable afterwards.
"""
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from lawmarket.modules.accounts.domain.models.role import Role, RoleType
from lawmarket.modules.clients.domain.models.location import Location
from lawmarket.modules.lawyers.domain.models.value_objects import (
    BarCredentials,
    DocumentType,
    Education,
    LawyerDocument,
    LawyerSpecialization,
    SpecializationKind,
)
from lawmarket.shared.core.exceptions import ValidationError
from lawmarket.shared.domain.value_objects import Email
from lawmarket.shared.utils.helpers import utc_now


class TestEmail:
    def test_email_is_trimmed_and_lowercased(self):
        email = Email.create("  Jane.Doe@Example.COM ")

        assert email.value == "jane.doe@example.com"
        assert email.domain == "example.com"
        assert str(email) == "jane.doe@example.com"

    @pytest.mark.parametrize("raw", ["", "not-an-email", "two@@example.com", "spaces in@example.com", "a@b"])
    def test_malformed_email_is_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid email format"):
            Email.create(raw)

    @pytest.mark.parametrize("raw", ["john..doe@example.com", ".john@example.com", "john@-example.com"])
    def test_misplaced_dots_and_hyphens_are_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid email format") as exc_info:
            Email.create(raw)
        assert exc_info.value.details["field"] == "email"
        assert exc_info.value.details["reason"]

    def test_overlong_local_part_is_rejected(self):
        with pytest.raises(ValidationError):
            Email.create("x" * 65 + "@example.com")

    def test_email_is_immutable(self):
        email = Email.create("jane@example.com")
        with pytest.raises(PydanticValidationError):
            email.value = "other@example.com"


class TestRole:
    def test_role_parsing_is_case_insensitive(self):
        assert Role.create(" ADMIN ").value == RoleType.ADMIN
        assert Role.create("lawyer").is_lawyer
        assert str(Role.create("Client")) == "client"

    def test_unknown_role_lists_allowed_values(self):
        with pytest.raises(ValidationError, match="Must be one of: admin, lawyer, client") as exc_info:
            Role.create("owner")

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["field"] == "role"

    def test_roles_compare_by_value(self):
        assert Role.admin() == Role.create("admin")
        assert Role.client() != Role.lawyer()


class TestLocation:
    def test_location_is_trimmed(self):
        location = Location.create("  Nigeria ", " Lagos ")

        assert location.country == "Nigeria"
        assert location.state == "Lagos"
        assert str(location) == "Lagos, Nigeria"

    def test_blank_country_is_rejected(self):
        with pytest.raises(ValidationError, match="Country is required"):
            Location.create("   ", "Lagos")

    def test_blank_state_is_rejected(self):
        with pytest.raises(ValidationError, match="State is required"):
            Location.create("Nigeria", "")

    def test_locations_compare_by_value(self):
        assert Location.create("Kenya", "Nairobi") == Location.create(" Kenya", "Nairobi ")


class TestBarCredentials:
    def test_valid_credentials(self):
        credentials = BarCredentials.create(
            bar_number=" NBA-12345 ",
            issue_date=date(2015, 6, 1),
            bar_association="Nigerian Bar Association",
            expiry_date=date(2030, 6, 1),
        )

        assert credentials.bar_number == "NBA-12345"
        assert credentials.bar_association == "Nigerian Bar Association"

    def test_short_bar_number_is_rejected(self):
        with pytest.raises(ValidationError, match="Bar number must be at least 5 characters"):
            BarCredentials.create(bar_number="1234", issue_date=date(2015, 6, 1))

    def test_issue_date_is_required(self):
        with pytest.raises(ValidationError, match="Issue date is required"):
            BarCredentials.create(bar_number="NBA-12345", issue_date=None)

    def test_expiry_before_issue_is_rejected(self):
        with pytest.raises(ValidationError, match="Expiry date cannot be before issue date"):
            BarCredentials.create(
                bar_number="NBA-12345",
                issue_date=date(2015, 6, 1),
                expiry_date=date(2014, 6, 1),
            )


class TestEducation:
    def test_valid_education(self):
        education = Education.create("  University of Lagos ", 2012)

        assert education.law_school == "University of Lagos"
        assert education.years_since_graduation == utc_now().year - 2012

    def test_short_school_name_is_rejected(self):
        with pytest.raises(ValidationError, match="Law school name must be at least 3 characters"):
            Education.create("UL", 2012)

    def test_future_graduation_year_is_rejected(self):
        with pytest.raises(ValidationError, match="Graduation year cannot be in the future"):
            Education.create("University of Lagos", utc_now().year + 1)

    def test_ancient_graduation_year_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid graduation year"):
            Education.create("University of Lagos", 1850)


class TestLawyerDocument:
    def test_valid_document(self):
        document = LawyerDocument.create(
            document_type="bar_certificate",
            url=" https://files.example.com/cert.pdf ",
            public_id="docs/cert-1",
            original_name="cert.pdf",
            file_size=2048,
            mime_type="application/pdf",
        )

        assert document.document_type == DocumentType.BAR_CERTIFICATE
        assert document.url == "https://files.example.com/cert.pdf"
        assert document.id

    def test_unknown_document_type_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid document type: passport"):
            LawyerDocument.create(document_type="passport", url="https://x.test/a.pdf", public_id="a")

    def test_missing_url_is_rejected(self):
        with pytest.raises(ValidationError, match="Document URL is required"):
            LawyerDocument.create(document_type="law_degree", url=" ", public_id="a")

    def test_missing_public_id_is_rejected(self):
        with pytest.raises(ValidationError, match="Document public ID is required"):
            LawyerDocument.create(document_type="law_degree", url="https://x.test/a.pdf", public_id="")

    def test_negative_file_size_is_rejected(self):
        with pytest.raises(ValidationError, match="File size cannot be negative"):
            LawyerDocument.create(
                document_type="other",
                url="https://x.test/a.pdf",
                public_id="a",
                file_size=-1,
            )


class TestLawyerSpecialization:
    def test_negative_experience_is_rejected(self):
        with pytest.raises(ValidationError, match="Years of experience cannot be negative"):
            LawyerSpecialization.create("spec-1", SpecializationKind.PRIMARY, -2)

    def test_experience_defaults_to_zero(self):
        choice = LawyerSpecialization.create("spec-1", SpecializationKind.SECONDARY)
        assert choice.years_of_experience == 0
