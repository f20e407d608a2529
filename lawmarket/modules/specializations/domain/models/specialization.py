# 📄 File: lawmarket/modules/specializations/domain/models/specialization.py
# 🧭 Purpose (Layman Explanation):
# A legal practice area (family law, tax law, ...) that clients and lawyers pick from.
# 🧪 Purpose (Technical Summary):
# Specialization catalog entity with validated create and trusted reconstitute constructors.
# 🔗 Dependencies:
# pydantic, lawmarket.shared.domain.entity, lawmarket.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# SpecializationRepository, catalog lookups from client and lawyer domain services

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from lawmarket.shared.core.exceptions import ValidationError
from lawmarket.shared.domain.entity import EntityMetadata, new_metadata, restore_metadata


class Specialization(BaseModel):
    meta: EntityMetadata
    name: str
    description: Optional[str] = None

    @classmethod
    def create(cls, name: str, description: Optional[str] = None, specialization_id: Optional[str] = None) -> "Specialization":
        if not name or not name.strip():
            raise ValidationError("Specialization name is required", field="name")
        return cls(
            meta=new_metadata(specialization_id),
            name=name.strip(),
            description=description.strip() if description else None,
        )

    @classmethod
    def reconstitute(
        cls,
        specialization_id: str,
        name: str,
        description: Optional[str],
        created_at: datetime,
        updated_at: Optional[datetime] = None,
    ) -> "Specialization":
        return cls(
            meta=restore_metadata(specialization_id, created_at, updated_at),
            name=name,
            description=description,
        )

    @property
    def id(self) -> str:
        return self.meta.id
