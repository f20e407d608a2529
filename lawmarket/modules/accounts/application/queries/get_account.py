# 📄 File: lawmarket/modules/accounts/application/queries/get_account.py
# 🧭 Purpose (Layman Explanation):
# Questions the app can ask about accounts: one account, or a filtered page of them.
# 🧪 Purpose (Technical Summary):
# Query objects for single-account lookup and the admin account listing.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# account query handlers, user and admin routers

from typing import Optional

from pydantic import BaseModel, Field


class GetAccountQuery(BaseModel):
    account_id: str = Field(..., description="Account to load")


class ListAccountsQuery(BaseModel):
    role: Optional[str] = Field(None, description="Filter by role")
    banned: Optional[bool] = Field(None, description="Filter by ban state")
    onboarding_completed: Optional[bool] = Field(None, description="Filter by onboarding state")
    page: int = Field(1, description="1-based page number")
    limit: int = Field(20, description="Page size, at most 100")
