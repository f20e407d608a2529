# 📄 File: lawmarket/modules/lawyers/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application queries for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers application.queries package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
