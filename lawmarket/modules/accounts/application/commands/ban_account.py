# 📄 File: lawmarket/modules/accounts/application/commands/ban_account.py
# 🧭 Purpose (Layman Explanation):
# The admin request to ban (or lift the ban on) somebody's account.
# 🧪 Purpose (Technical Summary):
# Commands for the ban and unban admin actions.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# BanAccountCommandHandler, UnbanAccountCommandHandler, admin router

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BanAccountCommand(BaseModel):
    target_account_id: str = Field(..., description="Account to ban")
    reason: str = Field(..., description="Why the account is banned")
    expires_at: Optional[datetime] = Field(None, description="When the ban should end; None means permanent")


class UnbanAccountCommand(BaseModel):
    target_account_id: str = Field(..., description="Account to unban")
