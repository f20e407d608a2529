# 📄 File: lawmarket/shared/infrastructure/database/constraints.py
#
# 🧭 Purpose (Layman Explanation):
# Works out which database rule a failed write broke, so repositories can report
# "already exists" only when that is really what happened.
#
# 🧪 Purpose (Technical Summary):
# Classifies IntegrityError by constraint. PostgreSQL messages carry the constraint name
# produced by the naming convention in connection.py; SQLite messages carry "table.column"
# for unique failures and no name at all for foreign key failures.
#
# 🔗 Dependencies:
# - sqlalchemy.exc.IntegrityError
#
# 🔄 Connected Modules / Calls From:
# - client and lawyer profile repository implementations

from sqlalchemy.exc import IntegrityError


def _detail(error: IntegrityError) -> str:
    return str(error.orig)


def violates_unique(error: IntegrityError, table: str, column: str) -> bool:
    """True when the write broke the unique constraint on ``table.column``."""
    detail = _detail(error)
    return (
        f'"uq_{table}_{column}"' in detail
        or f"UNIQUE constraint failed: {table}.{column}" in detail
    )


def violates_foreign_key(error: IntegrityError, table: str, column: str) -> bool:
    """
    True when the write referenced a missing parent through ``table.column``.

    Only PostgreSQL names the constraint; SQLite foreign key failures never
    match and fall through to the caller's generic handling.
    """
    return f'"fk_{table}_{column}_' in _detail(error)
