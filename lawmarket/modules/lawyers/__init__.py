# 📄 File: lawmarket/modules/lawyers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers bounded context (domain / application / infrastructure / presentation).
# 🔗 Dependencies:
# lawmarket.shared
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router, other modules through their domain interfaces
