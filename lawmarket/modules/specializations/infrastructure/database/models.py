# 📄 File: lawmarket/modules/specializations/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the database table holding the list of legal practice areas.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the specialization catalog, referenced by client and lawyer link tables.
# 🔗 Dependencies:
# SQLAlchemy, lawmarket.shared.infrastructure.database.connection (Base)
# 🔄 Connected Modules / Calls From:
# specialization_repository_impl.py, client/lawyer link tables (foreign keys), Alembic migrations

from sqlalchemy import Column, DateTime, String, Text, func

from lawmarket.shared.infrastructure.database.connection import Base


class SpecializationModel(Base):
    """SQLAlchemy model for a catalog entry."""
    __tablename__ = "specializations"

    id = Column(String(36), primary_key=True, comment="Specialization identifier")
    name = Column(
        String(120),
        unique=True,
        nullable=False,
        comment="Display name, unique across the catalog"
    )
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<SpecializationModel(id={self.id}, name={self.name})>"
