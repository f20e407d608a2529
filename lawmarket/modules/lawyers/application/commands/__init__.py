# 📄 File: lawmarket/modules/lawyers/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Application commands for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers application.commands package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
