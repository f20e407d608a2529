# 📄 File: lawmarket/modules/accounts/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain events for user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts domain.events package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts
