# 📄 File: lawmarket/modules/lawyers/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the database tables that hold lawyer applications, their uploaded files, their
# practice areas and the languages they speak.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for lawyer_profiles (unique account_id, unique nullable bar_number) and
# its child tables lawyer_documents, lawyer_specializations and lawyer_languages.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - lawmarket.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - lawyer_profile_repository_impl.py, Alembic migrations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)

from lawmarket.shared.infrastructure.database.connection import Base


class LawyerProfileModel(Base):
    """
    SQLAlchemy model for lawyer profiles.

    Credential and education columns stay NULL until the credentials
    step has been completed.
    """
    __tablename__ = "lawyer_profiles"
    __table_args__ = (
        CheckConstraint(
            "onboarding_step IN ('basic_info', 'credentials', 'specializations', 'submitted')",
            name="onboarding_step_valid",
        ),
        CheckConstraint(
            "application_status IN ('pending', 'approved', 'rejected', 'revision')",
            name="application_status_valid",
        ),
    )

    id = Column(String(36), primary_key=True, comment="Lawyer profile identifier")
    account_id = Column(
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        comment="Owning account; at most one lawyer profile per account"
    )

    # Step 1: basic info
    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=False)
    email = Column(String(254), nullable=False, index=True)
    phone_number = Column(String(32), nullable=False)
    country = Column(String(100), nullable=False)

    # Step 2: credentials and education
    bar_number = Column(String(64), unique=True, nullable=True)
    bar_association = Column(String(255), nullable=True)
    bar_issue_date = Column(Date, nullable=True)
    bar_expiry_date = Column(Date, nullable=True)
    law_school = Column(String(255), nullable=True)
    graduation_year = Column(Integer, nullable=True)
    current_firm = Column(String(255), nullable=True)

    onboarding_step = Column(String(32), nullable=False, default="basic_info", index=True)
    application_status = Column(String(32), nullable=False, default="pending", index=True)
    profile_completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<LawyerProfileModel(id={self.id}, account_id={self.account_id}, step={self.onboarding_step})>"


class LawyerDocumentModel(Base):
    """Verification documents; the files live in external storage."""
    __tablename__ = "lawyer_documents"
    __table_args__ = (
        CheckConstraint(
            "document_type IN ('bar_certificate', 'law_degree', 'professional_id', 'other')",
            name="document_type_valid",
        ),
    )

    id = Column(String(36), primary_key=True)
    lawyer_id = Column(
        String(36),
        ForeignKey("lawyer_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    document_type = Column(String(32), nullable=False)
    url = Column(Text, nullable=False)
    public_id = Column(String(255), nullable=False, comment="Storage provider id, used for deletion")
    original_name = Column(String(255), nullable=True)
    file_size = Column(Integer, nullable=True)
    mime_type = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class LawyerSpecializationModel(Base):
    __tablename__ = "lawyer_specializations"
    __table_args__ = (
        CheckConstraint("kind IN ('primary', 'secondary')", name="kind_valid"),
        CheckConstraint("years_of_experience >= 0", name="years_non_negative"),
    )

    lawyer_id = Column(
        String(36),
        ForeignKey("lawyer_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    specialization_id = Column(
        String(36),
        ForeignKey("specializations.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    kind = Column(String(16), nullable=False)
    years_of_experience = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class LawyerLanguageModel(Base):
    __tablename__ = "lawyer_languages"

    lawyer_id = Column(
        String(36),
        ForeignKey("lawyer_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    language_id = Column(String(64), primary_key=True, comment="Language code, e.g. 'en'")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
