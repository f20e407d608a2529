# 📄 File: lawmarket/modules/specializations/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Infrastructure database for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations infrastructure.database package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
