# 📄 File: lawmarket/modules/accounts/application/commands/update_account_profile.py
# 🧭 Purpose (Layman Explanation):
# The request to change your own display name or profile picture.
# 🧪 Purpose (Technical Summary):
# Command carrying a partial account profile update; None means "leave unchanged".
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# UpdateAccountProfileCommandHandler, PATCH /user/profile

from typing import Optional

from pydantic import BaseModel, Field


class UpdateAccountProfileCommand(BaseModel):
    account_id: str = Field(..., description="Account being edited (the caller)")
    display_name: Optional[str] = Field(None, description="New display name, at least 2 characters")
    avatar_url: Optional[str] = Field(None, description="New avatar URL, empty string clears it")
