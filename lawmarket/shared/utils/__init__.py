# 📄 File: lawmarket/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared utils helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: utils.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
