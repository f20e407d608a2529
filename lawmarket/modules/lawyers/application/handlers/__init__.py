# 📄 File: lawmarket/modules/lawyers/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application handlers for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers application.handlers package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
