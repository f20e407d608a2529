# 📄 File: lawmarket/shared/domain/value_objects.py
# 🧭 Purpose (Layman Explanation):
# Checks that an email address looks real and stores it in one consistent form.
# 🧪 Purpose (Technical Summary):
# Immutable Email value object: syntax checked by email-validator (no DNS lookup),
# stored trimmed and lower-cased.
# 🔗 Dependencies:
# pydantic, email-validator, lawmarket.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Account.create, LawyerProfile.create

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict

from lawmarket.shared.core.exceptions import ValidationError


class Email(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str

    @classmethod
    def create(cls, raw: str) -> "Email":
        try:
            # Length limits (254 total, 64 local part) are enforced by the validator
            validated = validate_email((raw or "").strip(), check_deliverability=False)
        except EmailNotValidError as e:
            raise ValidationError(
                "Invalid email format", field="email", value=raw, details={"reason": str(e)}
            ) from e
        return cls(value=validated.normalized.lower())

    @property
    def domain(self) -> str:
        return self.value.split("@")[1]

    def __str__(self) -> str:
        return self.value
