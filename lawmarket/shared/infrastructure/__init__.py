# 📄 File: lawmarket/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared infrastructure helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: infrastructure.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
