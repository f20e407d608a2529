# 📄 File: lawmarket/modules/accounts/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles user accounts: profiles, roles and bans.
# 🧪 Purpose (Technical Summary):
# accounts bounded context (domain / application / infrastructure / presentation).
# 🔗 Dependencies:
# lawmarket.shared
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router, other modules through their domain interfaces
