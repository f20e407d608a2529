# 📄 File: lawmarket/modules/lawyers/application/commands/save_lawyer_specializations.py
# 🧭 Purpose (Layman Explanation):
# The practice areas a lawyer works in, how long in each, and the languages they speak.
# 🧪 Purpose (Technical Summary):
# Command for step 3 (specializations).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# SaveLawyerSpecializationsCommandHandler, PUT /lawyers/onboarding/specializations

from typing import List

from pydantic import BaseModel, Field


class SpecializationInput(BaseModel):
    specialization_id: str
    years_of_experience: int = 0


class SaveLawyerSpecializationsCommand(BaseModel):
    account_id: str
    primary: List[SpecializationInput] = Field(default_factory=list)
    secondary: List[SpecializationInput] = Field(default_factory=list)
    language_ids: List[str] = Field(default_factory=list)

    @property
    def all_specialization_ids(self) -> List[str]:
        return [item.specialization_id for item in self.primary + self.secondary]
