# 📄 File: lawmarket/modules/lawyers/application/commands/start_lawyer_onboarding.py
# 🧭 Purpose (Layman Explanation):
# The personal details a lawyer gives to open an application.
# 🧪 Purpose (Technical Summary):
# Command for step 1 (basic_info); email and verification flag come from the session.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# StartLawyerOnboardingCommandHandler, POST /lawyers/onboarding

from typing import Optional

from pydantic import BaseModel, Field


class StartLawyerOnboardingCommand(BaseModel):
    account_id: str
    email: str = Field(..., description="Session email, copied onto the profile")
    email_verified: bool
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    phone_number: str
    country: str
