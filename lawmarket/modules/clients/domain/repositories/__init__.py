# 📄 File: lawmarket/modules/clients/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain repositories for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients domain.repositories package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
