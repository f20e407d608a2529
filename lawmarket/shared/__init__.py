# 📄 File: lawmarket/shared/__init__.py
# 🧭 Purpose (Layman Explanation):
# Common building blocks every part of the marketplace uses, like settings, errors, logging and the database.
# 🧪 Purpose (Technical Summary):
# Shared kernel: config, core exceptions and schemas, domain building blocks, events, database infrastructure and utilities.
# 🔗 Dependencies:
# pydantic, pydantic-settings, SQLAlchemy, python-json-logger
# 🔄 Connected Modules / Calls From:
# All modules

"""
Shared Kernel

- config: environment-driven settings
- core: exception hierarchy and API envelope schemas
- domain: entity metadata and shared value objects
- events: domain event base class and in-process publisher
- infrastructure.database: async engine, declarative base, sessions
- utils: structured logging and small helpers
"""
