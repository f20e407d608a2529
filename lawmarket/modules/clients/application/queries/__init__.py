# 📄 File: lawmarket/modules/clients/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application queries for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients application.queries package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
