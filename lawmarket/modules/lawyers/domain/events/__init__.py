# 📄 File: lawmarket/modules/lawyers/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain events for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers domain.events package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
