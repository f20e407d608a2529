# 📄 File: lawmarket/modules/specializations/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain models for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations domain.models package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
