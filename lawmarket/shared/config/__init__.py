# 📄 File: lawmarket/shared/config/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared config helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: config.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
