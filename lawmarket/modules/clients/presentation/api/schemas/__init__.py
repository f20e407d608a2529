# 📄 File: lawmarket/modules/clients/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api schemas for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients presentation.api.schemas package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
