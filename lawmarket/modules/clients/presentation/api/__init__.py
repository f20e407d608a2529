# 📄 File: lawmarket/modules/clients/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients presentation.api package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
