# 📄 File: lawmarket/modules/clients/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain services for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients domain.services package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
