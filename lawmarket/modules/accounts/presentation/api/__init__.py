# 📄 File: lawmarket/modules/accounts/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts presentation.api package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
