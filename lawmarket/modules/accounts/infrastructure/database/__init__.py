# 📄 File: lawmarket/modules/accounts/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Infrastructure database for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts infrastructure.database package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
