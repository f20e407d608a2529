# 📄 File: lawmarket/modules/accounts/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain repositories for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts domain.repositories package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
