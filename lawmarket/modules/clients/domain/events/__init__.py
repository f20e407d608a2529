# 📄 File: lawmarket/modules/clients/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain events for client profiles and client onboarding.
# 🧪 Purpose (Technical Summary):
# clients domain.events package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.clients
