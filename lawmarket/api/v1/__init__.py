# 📄 File: lawmarket/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the web API.
# 🧪 Purpose (Technical Summary):
# v1 router aggregation and health endpoints.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# lawmarket.main
