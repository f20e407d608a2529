# 📄 File: lawmarket/modules/clients/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Infrastructure database for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients infrastructure.database package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
