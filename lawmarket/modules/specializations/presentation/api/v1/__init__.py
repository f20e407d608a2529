# 📄 File: lawmarket/modules/specializations/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api v1 for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations presentation.api.v1 package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
