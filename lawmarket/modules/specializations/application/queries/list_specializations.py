# 📄 File: lawmarket/modules/specializations/application/queries/list_specializations.py
# 🧭 Purpose (Layman Explanation):
# Asks for the list of practice areas people can choose from.
# 🧪 Purpose (Technical Summary):
# Query object for the catalog read side.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ListSpecializationsQueryHandler, GET /specializations

from pydantic import BaseModel


class ListSpecializationsQuery(BaseModel):
    pass
