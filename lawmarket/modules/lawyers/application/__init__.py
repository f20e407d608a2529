# 📄 File: lawmarket/modules/lawyers/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases people can carry out for lawyer applications and their step-by-step onboarding.
# 🧪 Purpose (Technical Summary):
# Application layer: commands, queries and their handlers.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers
