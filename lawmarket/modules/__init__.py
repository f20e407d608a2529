# 📄 File: lawmarket/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# The separate business areas of the marketplace.
# 🧪 Purpose (Technical Summary):
# Bounded-context packages, each split into domain, application, infrastructure and presentation.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# lawmarket.api.v1.router
