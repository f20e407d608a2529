# 📄 File: lawmarket/modules/lawyers/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# Domain layer: aggregates, value objects, events, repository interfaces and domain services.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
