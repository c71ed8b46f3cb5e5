# drivers.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Callable

from connstrgen.dialect import PostgresConnectionString, SqlServerConnectionString
from connstrgen.utils.data import to_int


@dataclass(frozen=True)
class Dialect:
    name: str
    default_port: int | None
    from_config: Callable[[Mapping[str, Any]], Any]   # config parts -> builder

_REGISTRY: dict[str, Dialect] = {}

def register_dialect(dialect: Dialect) -> None:
    _REGISTRY[dialect.name.lower()] = dialect

def get_dialect(name: str) -> Dialect | None:
    return _REGISTRY.get((name or "").lower())

def dialect_names() -> list[str]:
    return sorted(_REGISTRY)

# ---- helpers ---------------------------------------------------------------

def _flag(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "on")
    return bool(v)

def _cred_and_host(builder, c: Mapping[str, Any]):
    user = c.get("user")
    if user:
        password = c.get("password")
        if password is None:
            builder = builder.set_username_without_password(str(user))
        else:
            builder = builder.set_username_and_password(str(user), str(password))
    host = c.get("host")
    if host:
        port = to_int("port", c.get("port"))
        if port is None:
            builder = builder.set_host_with_default_port(str(host))
        else:
            builder = builder.set_host_with_port(str(host), port)
    if c.get("database"):
        builder = builder.set_database_name(str(c["database"]))
    timeout = to_int("connect_timeout", c.get("connect_timeout"))
    if timeout is not None:
        builder = builder.set_connect_timeout(timeout)
    return builder

# ---- built-in dialects -----------------------------------------------------

# PostgreSQL: every option becomes a URI query parameter
def _postgres_build(c: Mapping[str, Any]) -> PostgresConnectionString:
    conn_str = _cred_and_host(PostgresConnectionString(), c)
    for key, value in (c.get("options") or {}).items():
        conn_str = conn_str.dangerously_set_parameter(str(key), str(value))
    return conn_str

postgres = Dialect(
    name="postgres",
    default_port=5432,
    from_config=_postgres_build,
)
register_dialect(postgres)
# common alias
register_dialect(Dialect(**{**postgres.__dict__, "name": "postgresql"}))

# SQL Server: known options map onto builder methods, the rest pass through
def _sqlserver_build(c: Mapping[str, Any]) -> SqlServerConnectionString:
    conn_str = _cred_and_host(SqlServerConnectionString(), c)
    options = dict(c.get("options") or {})

    trust = _flag(options.pop("trust_server_certificate", False))
    encrypt = _flag(options.pop("encrypt", False))
    if trust:
        conn_str = conn_str.enable_encryption_and_trust_server_certificate()
    elif encrypt:
        conn_str = conn_str.enable_encryption()

    command_timeout = to_int("command_timeout", options.pop("command_timeout", None))
    if command_timeout is not None:
        conn_str = conn_str.set_command_timeout(command_timeout)
    retry_count = to_int("connect_retry_count", options.pop("connect_retry_count", None))
    if retry_count is not None:
        conn_str = conn_str.set_connect_retry_count(retry_count)
    retry_interval = to_int("connect_retry_interval", options.pop("connect_retry_interval", None))
    if retry_interval is not None:
        conn_str = conn_str.set_connect_retry_interval(retry_interval)

    for key, value in options.items():
        conn_str = conn_str.dangerously_set_parameter(str(key), str(value))
    return conn_str

sqlserver = Dialect(
    name="sqlserver",
    default_port=1433,
    from_config=_sqlserver_build,
)
register_dialect(sqlserver)
# common alias
register_dialect(Dialect(**{**sqlserver.__dict__, "name": "mssql"}))
