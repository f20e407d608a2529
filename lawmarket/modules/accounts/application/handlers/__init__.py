# 📄 File: lawmarket/modules/accounts/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application handlers for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts application.handlers package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
