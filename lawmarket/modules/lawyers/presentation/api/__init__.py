# 📄 File: lawmarket/modules/lawyers/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Presentation api for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers presentation.api package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
