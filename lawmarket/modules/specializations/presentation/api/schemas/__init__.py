# 📄 File: lawmarket/modules/specializations/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api schemas for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations presentation.api.schemas package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
