# 📄 File: lawmarket/modules/specializations/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases people can carry out for the catalog of legal practice areas.
# 🧪 Purpose (Technical Summary):
# Application layer: commands, queries and their handlers.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
