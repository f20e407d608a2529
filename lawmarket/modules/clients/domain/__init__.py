# 📄 File: lawmarket/modules/clients/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# Domain layer: aggregates, value objects, events, repository interfaces and domain services.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
