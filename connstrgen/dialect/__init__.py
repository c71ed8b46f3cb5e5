"""
Dialect module for connstrgen.

This package provides connection string builders for:
- PostgreSQL (URI style, percent-encoded values)
- SQL Server (semicolon-delimited key/value pairs, quoted values)

Submodules:
- postgres: PostgresConnectionString
- sqlserver: SqlServerConnectionString

Usage:
    from connstrgen.dialect import get_builder

    conn_str = get_builder('postgres').set_host_with_port('localhost', 5432)
    str(conn_str)  # 'postgres://localhost:5432'
"""

from connstrgen.dialect.postgres import PostgresConnectionString
from connstrgen.dialect.sqlserver import SqlServerConnectionString


def get_builder(dialect_type):
    """
    Factory function to create an empty builder for a dialect.

    Args:
        dialect_type: 'postgres', 'postgresql', 'sqlserver' or 'mssql'

    Returns:
        PostgresConnectionString or SqlServerConnectionString

    Raises:
        ValueError: If dialect_type is not supported
    """
    dialect_type = (dialect_type or '').lower()

    if dialect_type in ['postgres', 'postgresql']:
        return PostgresConnectionString()
    elif dialect_type in ['sqlserver', 'mssql']:
        return SqlServerConnectionString()
    else:
        raise ValueError(f"Unsupported dialect type: {dialect_type!r}")


__all__ = [
    'PostgresConnectionString',
    'SqlServerConnectionString',
    'get_builder',
]
