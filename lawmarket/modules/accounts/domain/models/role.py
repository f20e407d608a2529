# 📄 File: lawmarket/modules/accounts/domain/models/role.py
# 🧭 Purpose (Layman Explanation):
# The three kinds of people on the marketplace: admins, lawyers and clients.
# 🧪 Purpose (Technical Summary):
# Role value object wrapping the RoleType enum with validated parsing, factories and predicates.
# 🔗 Dependencies:
# pydantic, enum, lawmarket.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Account aggregate, AccountDomainService, role-change command, account repository mapping

from enum import Enum

from pydantic import BaseModel, ConfigDict

from lawmarket.shared.core.exceptions import ValidationError


class RoleType(str, Enum):
    ADMIN = "admin"
    LAWYER = "lawyer"
    CLIENT = "client"


class Role(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: RoleType

    @classmethod
    def create(cls, raw: str) -> "Role":
        try:
            return cls(value=RoleType((raw or "").strip().lower()))
        except ValueError:
            allowed = ", ".join(role.value for role in RoleType)
            raise ValidationError(
                f"Invalid role: {raw}. Must be one of: {allowed}",
                field="role",
                value=raw,
            ) from None

    @classmethod
    def admin(cls) -> "Role":
        return cls(value=RoleType.ADMIN)

    @classmethod
    def lawyer(cls) -> "Role":
        return cls(value=RoleType.LAWYER)

    @classmethod
    def client(cls) -> "Role":
        return cls(value=RoleType.CLIENT)

    @property
    def is_admin(self) -> bool:
        return self.value == RoleType.ADMIN

    @property
    def is_lawyer(self) -> bool:
        return self.value == RoleType.LAWYER

    @property
    def is_client(self) -> bool:
        return self.value == RoleType.CLIENT

    def __str__(self) -> str:
        return self.value.value
