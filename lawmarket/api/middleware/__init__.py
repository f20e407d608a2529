# 📄 File: lawmarket/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that run around every request, such as request logging.
# 🧪 Purpose (Technical Summary):
# HTTP middleware package.
# 🔗 Dependencies:
# Starlette
# 🔄 Connected Modules / Calls From:
# lawmarket.main
