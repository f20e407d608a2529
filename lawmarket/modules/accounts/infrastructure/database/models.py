# 📄 File: lawmarket/modules/accounts/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the database table that mirrors each signed-up person's account.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the accounts table: identity from the auth provider, role, ban
# state and onboarding flag. Email uniqueness and the role domain are enforced by constraints.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - lawmarket.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - account_repository_impl.py (CRUD operations)
# - client/lawyer tables (foreign keys), Alembic migrations

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, String, Text, func

from lawmarket.shared.infrastructure.database.connection import Base


class AccountModel(Base):
    """
    SQLAlchemy model for marketplace accounts.

    Rows are provisioned when the auth provider registers a user;
    this service only updates them.
    """
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("role IN ('admin', 'lawyer', 'client')", name="role_valid"),
    )

    id = Column(String(36), primary_key=True, comment="Account id issued by the auth provider")
    display_name = Column(String(255), nullable=False)
    email = Column(
        String(254),
        unique=True,
        nullable=False,
        index=True,
        comment="Lower-cased email address"
    )
    email_verified = Column(Boolean, nullable=False, default=False)
    avatar_url = Column(Text, nullable=True)
    role = Column(String(20), nullable=False, default="client", index=True)

    banned = Column(Boolean, nullable=False, default=False, index=True)
    ban_reason = Column(Text, nullable=True)
    ban_expires_at = Column(DateTime(timezone=True), nullable=True)

    onboarding_completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, email={self.email}, role={self.role})>"
