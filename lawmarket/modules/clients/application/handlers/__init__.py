# 📄 File: lawmarket/modules/clients/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application handlers for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients application.handlers package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
