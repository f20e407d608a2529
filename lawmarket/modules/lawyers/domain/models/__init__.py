# 📄 File: lawmarket/modules/lawyers/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain models for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers domain.models package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
