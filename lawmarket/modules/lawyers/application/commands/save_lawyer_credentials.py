# 📄 File: lawmarket/modules/lawyers/application/commands/save_lawyer_credentials.py
# 🧭 Purpose (Layman Explanation):
# A lawyer's bar registration, law school and verification files.
# 🧪 Purpose (Technical Summary):
# Commands for step 2 (credentials) and for attaching documents while in steps 2 or 3.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# SaveLawyerCredentialsCommandHandler, AddLawyerDocumentsCommandHandler, lawyers router

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class DocumentInput(BaseModel):
    """Metadata of a file already uploaded to external storage."""
    document_type: str
    url: str
    public_id: str
    original_name: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None


class SaveLawyerCredentialsCommand(BaseModel):
    account_id: str
    bar_number: str
    bar_association: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    law_school: str
    graduation_year: int
    current_firm: Optional[str] = None
    documents: List[DocumentInput] = Field(default_factory=list)


class AddLawyerDocumentsCommand(BaseModel):
    account_id: str
    documents: List[DocumentInput]
