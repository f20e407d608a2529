# 📄 File: lawmarket/modules/specializations/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations presentation.api package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
