# 📄 File: lawmarket/modules/clients/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How client profiles and client onboarding are stored and connected to outside services.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy models and repository implementations.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
