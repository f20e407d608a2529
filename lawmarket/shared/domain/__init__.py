# 📄 File: lawmarket/shared/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared domain helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: domain.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
