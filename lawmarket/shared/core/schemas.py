# 📄 File: lawmarket/shared/core/schemas.py
# 🧭 Purpose (Layman Explanation):
# The common shape every API answer takes, and the camelCase naming the web clients expect.
# 🧪 Purpose (Technical Summary):
# CamelModel base (snake_case attributes, camelCase JSON aliases) and the generic ApiResponse
# success envelope shared by all routers.
# 🔗 Dependencies:
# pydantic (alias generators, generics)
# 🔄 Connected Modules / Calls From:
# Every module's presentation/api/schemas package and router

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[DataT]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[DataT] = None
