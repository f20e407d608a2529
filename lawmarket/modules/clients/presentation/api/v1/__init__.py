# 📄 File: lawmarket/modules/clients/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api v1 for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients presentation.api.v1 package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
