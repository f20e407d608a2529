# 📄 File: lawmarket/modules/specializations/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application queries for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# specializations application.queries package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
