# 📄 File: lawmarket/modules/clients/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the database tables for client profiles and the practice areas each client picked.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for client_profiles (unique account_id, the real 1:1 guarantee) and the
# client_specializations link table keyed by (client_id, specialization_id).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - lawmarket.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - client_profile_repository_impl.py, Alembic migrations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, func

from lawmarket.shared.infrastructure.database.connection import Base


class ClientProfileModel(Base):
    """SQLAlchemy model for client profiles."""
    __tablename__ = "client_profiles"

    id = Column(String(36), primary_key=True, comment="Client profile identifier")
    account_id = Column(
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        comment="Owning account; at most one client profile per account"
    )
    display_name = Column(String(255), nullable=False)
    phone_number = Column(String(32), nullable=True)
    country = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    company = Column(String(255), nullable=True)
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<ClientProfileModel(id={self.id}, account_id={self.account_id})>"


class ClientSpecializationModel(Base):
    """Link rows between a client profile and catalog specializations."""
    __tablename__ = "client_specializations"

    client_id = Column(
        String(36),
        ForeignKey("client_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    specialization_id = Column(
        String(36),
        ForeignKey("specializations.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
