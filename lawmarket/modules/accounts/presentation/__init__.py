# 📄 File: lawmarket/modules/accounts/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How user accounts: profiles, roles and bans are exposed over the web API.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, schemas and dependency factories.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
