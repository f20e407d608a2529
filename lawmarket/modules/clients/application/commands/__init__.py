# 📄 File: lawmarket/modules/clients/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application commands for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients application.commands package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
