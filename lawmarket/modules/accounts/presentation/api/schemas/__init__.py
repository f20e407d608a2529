# 📄 File: lawmarket/modules/accounts/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api schemas for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts presentation.api.schemas package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
