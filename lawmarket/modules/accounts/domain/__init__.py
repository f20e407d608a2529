# 📄 File: lawmarket/modules/accounts/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# Domain layer: aggregates, value objects, events, repository interfaces and domain services.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
