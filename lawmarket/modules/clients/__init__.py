# 📄 File: lawmarket/modules/clients/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients bounded context (domain / application / infrastructure / presentation).
# 🔗 Dependencies:
# lawmarket.shared
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router, other modules through their domain interfaces
