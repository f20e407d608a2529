# 📄 File: lawmarket/modules/accounts/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain models for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts domain.models package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
