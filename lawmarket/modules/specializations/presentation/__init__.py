# 📄 File: lawmarket/modules/specializations/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the catalog of legal practice areas are exposed over the web API.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, schemas and dependency factories.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
