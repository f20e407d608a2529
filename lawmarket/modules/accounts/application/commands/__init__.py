# 📄 File: lawmarket/modules/accounts/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application commands for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts application.commands package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
