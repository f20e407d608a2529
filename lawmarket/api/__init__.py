# 📄 File: lawmarket/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about how the web API is exposed: middleware and versioned routes.
# 🧪 Purpose (Technical Summary):
# API layer package: request middleware and the v1 router aggregation.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# lawmarket.main
