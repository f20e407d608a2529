# 📄 File: lawmarket/modules/lawyers/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain services for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers domain.services package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
