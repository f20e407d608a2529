# 📄 File: lawmarket/modules/accounts/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api v1 for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts presentation.api.v1 package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
