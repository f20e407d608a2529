# 📄 File: lawmarket/modules/specializations/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application handlers for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations application.handlers package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
