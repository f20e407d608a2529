# 📄 File: lawmarket/modules/clients/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases people can carry out for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# Application layer: commands, queries and their handlers.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
