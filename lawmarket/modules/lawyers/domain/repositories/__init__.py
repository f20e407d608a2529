# 📄 File: lawmarket/modules/lawyers/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Domain repositories for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# lawyers domain.repositories package.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
