"""
SQL Dialects

Closed set of SQL dialect variants a driver can select. Statement generation
for each dialect lives with the migration runner; here only the names matter.
"""

from enum import StrEnum


class SqlDialect(StrEnum):
    """SQL-generation variant associated with a driver"""

    POSTGRES = "postgres"
    MYSQL = "mysql"


def dialect_by_name(name: str) -> SqlDialect | None:
    """
    Resolve a dialect name to its variant

    Args:
        name: Dialect name (e.g., 'postgres', 'mysql')

    Returns:
        Matching SqlDialect, or None for unknown names
    """
    try:
        return SqlDialect(name)
    except ValueError:
        return None
