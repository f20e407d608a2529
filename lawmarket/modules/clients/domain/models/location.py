# 📄 File: lawmarket/modules/clients/domain/models/location.py
# 🧭 Purpose (Layman Explanation):
# Where a client is based: a country and a state, both required.
# 🧪 Purpose (Technical Summary):
# Immutable, self-validating Location value object; replaced wholesale, never edited in place.
# 🔗 Dependencies:
# pydantic, lawmarket.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# ClientProfile aggregate, onboarding and profile-update handlers, client repository mapping

from pydantic import BaseModel, ConfigDict

from lawmarket.shared.core.exceptions import ValidationError


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    state: str

    @classmethod
    def create(cls, country: str, state: str) -> "Location":
        country = (country or "").strip()
        state = (state or "").strip()
        if not country:
            raise ValidationError("Country is required", field="country")
        if not state:
            raise ValidationError("State is required", field="state")
        return cls(country=country, state=state)

    def __str__(self) -> str:
        return f"{self.state}, {self.country}"
