# 📄 File: lawmarket/modules/lawyers/application/commands/submit_lawyer_application.py
# 🧭 Purpose (Layman Explanation):
# Sends a finished lawyer application to the admins.
# 🧪 Purpose (Technical Summary):
# Command for step 4 (submitted).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# SubmitLawyerApplicationCommandHandler, POST /lawyers/onboarding/submit

from pydantic import BaseModel


class SubmitLawyerApplicationCommand(BaseModel):
    account_id: str
