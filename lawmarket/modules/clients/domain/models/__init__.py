# 📄 File: lawmarket/modules/clients/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain models for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients domain.models package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
