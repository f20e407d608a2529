# 📄 File: lawmarket/modules/accounts/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Infrastructure external for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts infrastructure.external package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
