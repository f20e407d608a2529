# 📄 File: lawmarket/modules/lawyers/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Infrastructure database for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers infrastructure.database package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
