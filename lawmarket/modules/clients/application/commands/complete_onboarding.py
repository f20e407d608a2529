# 📄 File: lawmarket/modules/clients/application/commands/complete_onboarding.py
# 🧭 Purpose (Layman Explanation):
# Everything a new client submits to finish signing up, and the short summary they get back.
#
# 🧪 Purpose (Technical Summary):
# Command and result models for client onboarding. The command stays permissive on purpose so
# the domain raises its own ValidationError messages (e.g. empty specialization list).
#
# 🔗 Dependencies:
# pydantic
#
# 🔄 Connected Modules / Calls From:
# CompleteOnboardingCommandHandler, POST /onboarding/complete

from typing import List, Optional

from pydantic import BaseModel, Field


class CompleteOnboardingCommand(BaseModel):
    """
    Command for creating a client profile and completing onboarding
    in one step.
    """
    account_id: str = Field(..., description="Caller account id")
    display_name: str = Field(..., description="Name shown on the client profile")
    email_verified: bool = Field(..., description="Whether the session email is verified")
    phone_number: Optional[str] = Field(None, description="Contact phone number")
    country: str = Field(..., description="Client country")
    state: str = Field(..., description="Client state or region")
    company: Optional[str] = Field(None, description="Company the client represents")
    specialization_ids: List[str] = Field(default_factory=list, description="1 to 3 catalog ids")


class CompleteOnboardingResult(BaseModel):
    client_id: str
    account_id: str
    specialization_count: int
    onboarding_completed: bool
