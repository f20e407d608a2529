# 📄 File: lawmarket/__init__.py
# 🧭 Purpose (Layman Explanation):
# The legal marketplace backend: clients looking for legal help, lawyers applying to offer it, and admins keeping the platform in order.
# 🧪 Purpose (Technical Summary):
# Root package of the LawMarket API (FastAPI modular monolith).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# lawmarket.main, uvicorn, tests

"""
LawMarket API

Modules:
- accounts: account profile, roles, bans and admin user management
- clients: client onboarding and client profiles
- lawyers: multi-step lawyer onboarding and application submission
- specializations: catalog of legal practice areas

Shared kernel lives in lawmarket.shared, HTTP plumbing in lawmarket.api.
"""
