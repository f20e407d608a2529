# 📄 File: lawmarket/modules/lawyers/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How lawyer applications and their step-by-step onboarding are stored and connected to outside services.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy models and repository implementations.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
