# 📄 File: lawmarket/modules/accounts/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How user accounts: profiles, roles and bans are stored and connected to outside services.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy models and repository implementations.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
