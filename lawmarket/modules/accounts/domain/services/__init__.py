# 📄 File: lawmarket/modules/accounts/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain services for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts domain.services package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
