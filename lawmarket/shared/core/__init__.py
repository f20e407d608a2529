# 📄 File: lawmarket/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared core helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: core.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
