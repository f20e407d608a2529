# 📄 File: lawmarket/modules/specializations/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain services for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations domain.services package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
