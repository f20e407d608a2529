# 📄 File: lawmarket/modules/specializations/presentation/api/schemas/specialization_schemas.py
# 🧭 Purpose (Layman Explanation):
# How one practice area is shown on the web API.
# 🧪 Purpose (Technical Summary):
# Response model converted from the Specialization entity.
# 🔗 Dependencies:
# lawmarket.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# specializations router

from typing import Optional

from lawmarket.modules.specializations.domain.models.specialization import Specialization
from lawmarket.shared.core.schemas import CamelModel


class SpecializationResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, specialization: Specialization) -> "SpecializationResponse":
        return cls(id=specialization.id, name=specialization.name, description=specialization.description)
