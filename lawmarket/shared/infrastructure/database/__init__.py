# 📄 File: lawmarket/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared database helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: infrastructure/database.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
