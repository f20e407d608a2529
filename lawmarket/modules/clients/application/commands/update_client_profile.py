# 📄 File: lawmarket/modules/clients/application/commands/update_client_profile.py
# 🧭 Purpose (Layman Explanation):
# Requests to edit a client profile: contact details, location, and the chosen practice areas.
# 🧪 Purpose (Technical Summary):
# Partial-update command (None = unchanged) plus add/remove specialization commands.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# client command handlers, clients router

from typing import Optional

from pydantic import BaseModel, Field


class UpdateClientProfileCommand(BaseModel):
    account_id: str = Field(..., description="Owner of the profile (the caller)")
    display_name: Optional[str] = None
    phone_number: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = Field(None, description="Must be sent together with state")
    state: Optional[str] = Field(None, description="Must be sent together with country")


class AddClientSpecializationCommand(BaseModel):
    account_id: str
    specialization_id: str


class RemoveClientSpecializationCommand(BaseModel):
    account_id: str
    specialization_id: str
