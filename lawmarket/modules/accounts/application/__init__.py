# 📄 File: lawmarket/modules/accounts/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases people can carry out for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# Application layer: commands, queries and their handlers.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
