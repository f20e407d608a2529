# 📄 File: lawmarket/modules/specializations/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain repositories for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations domain.repositories package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
