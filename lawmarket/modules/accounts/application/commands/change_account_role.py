# 📄 File: lawmarket/modules/accounts/application/commands/change_account_role.py
# 🧭 Purpose (Layman Explanation):
# The admin request to turn an account into an admin, lawyer or client.
# 🧪 Purpose (Technical Summary):
# Role-change command; the raw role string is parsed by the Role value object in the handler.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ChangeAccountRoleCommandHandler, PATCH /admin/users/{id}/role

from pydantic import BaseModel, Field


class ChangeAccountRoleCommand(BaseModel):
    target_account_id: str = Field(..., description="Account whose role changes")
    role: str = Field(..., description="admin, lawyer or client")
