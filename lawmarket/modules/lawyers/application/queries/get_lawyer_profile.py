# 📄 File: lawmarket/modules/lawyers/application/queries/get_lawyer_profile.py
# 🧭 Purpose (Layman Explanation):
# Asks for the caller's own lawyer application.
# 🧪 Purpose (Technical Summary):
# Query object for the lawyer read side.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# GetMyLawyerProfileQueryHandler, GET /lawyers/me

from pydantic import BaseModel


class GetMyLawyerProfileQuery(BaseModel):
    account_id: str
