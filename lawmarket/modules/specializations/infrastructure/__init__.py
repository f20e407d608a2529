# 📄 File: lawmarket/modules/specializations/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the catalog of legal practice areas are stored and connected to outside services.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy models and repository implementations.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.specializations
