# 📄 File: lawmarket/modules/accounts/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application queries for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts application.queries package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
