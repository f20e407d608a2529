# 📄 File: lawmarket/modules/specializations/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# Domain layer: aggregates, value objects, events, repository interfaces and domain services.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
