# 📄 File: lawmarket/modules/lawyers/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api schemas for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers presentation.api.schemas package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
