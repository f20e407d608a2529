# 📄 File: lawmarket/modules/lawyers/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How lawyer applications and their step-by-step onboarding are exposed over the web API.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, schemas and dependency factories.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
