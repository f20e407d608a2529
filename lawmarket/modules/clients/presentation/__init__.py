# 📄 File: lawmarket/modules/clients/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How client profiles and client onboarding are exposed over the web API.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, schemas and dependency factories.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
