# 📄 File: lawmarket/modules/specializations/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations bounded context (domain / application / infrastructure / presentation).
# 🔗 Dependencies:
# lawmarket.shared
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router, other modules through their domain interfaces
