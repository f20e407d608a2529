# 📄 File: lawmarket/modules/clients/application/queries/get_client_profile.py
# 🧭 Purpose (Layman Explanation):
# Questions about client profiles: mine, a specific one, or all of them.
# 🧪 Purpose (Technical Summary):
# Query objects for the client read side.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# client query handlers, clients router

from pydantic import BaseModel


class GetMyClientProfileQuery(BaseModel):
    account_id: str


class GetClientProfileQuery(BaseModel):
    profile_id: str


class ListClientProfilesQuery(BaseModel):
    pass
