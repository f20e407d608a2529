# 📄 File: lawmarket/modules/lawyers/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api v1 for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers presentation.api.v1 package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
