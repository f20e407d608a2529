# 📄 File: lawmarket/shared/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared events helpers.
# 🧪 Purpose (Technical Summary):
# Shared kernel sub-package: events.
# 🔗 Dependencies:
# See module files
# 🔄 Connected Modules / Calls From:
# All modules
