from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import os, json, re, logging

from .drivers import get_dialect, dialect_names
from .load_env import load_dotenv_if_enabled
from .exceptions import ConnStrConfigurationError
from .utils.data import to_int

logger = logging.getLogger(__name__)

_ENV_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

def _expand_env_str(v: str) -> str:
    # Expand ${VAR} from os.environ; missing vars become ""
    return _ENV_RE.sub(lambda m: os.environ.get(m.group(1), ""), v)

def _expand_env(obj: Any) -> Any:
    if isinstance(obj, str): return _expand_env_str(obj)
    if isinstance(obj, dict): return {k: _expand_env(v) for k, v in obj.items()}
    if isinstance(obj, list): return [_expand_env(x) for x in obj]
    return obj

def _read_json(path: str | os.PathLike[str]) -> dict[str, Any]:
    p = Path(path).expanduser()
    if not p.exists():
        raise ConnStrConfigurationError(f"Config file not found: {p}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConnStrConfigurationError(f"Invalid JSON in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConnStrConfigurationError(f"Expected a JSON object in {p}")
    return data

@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    type: str
    host: str | None = None
    user: str | None = None
    password: str | None = field(default=None, repr=False)
    port: int | None = None
    database: str | None = None
    connect_timeout: int | None = None
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConnectionConfig":
        d = _expand_env(dict(data))  # expand ${ENV} inside string values
        db_type = (d.get("type") or "").strip().lower()
        if not db_type:
            raise ConnStrConfigurationError("'type' is required for a connection entry.")
        if get_dialect(db_type) is None:
            raise ConnStrConfigurationError(
                f"Unknown connection type {db_type!r}; expected one of {dialect_names()}"
            )

        options = d.get("options") or {}
        if not isinstance(options, Mapping):
            raise ConnStrConfigurationError("'options' must be a mapping if provided")

        return cls(
            type=db_type,
            host=d.get("host"),
            user=d.get("user"),
            password=d.get("password"),
            port=to_int("port", d.get("port")),
            database=d.get("database"),
            connect_timeout=to_int("connect_timeout", d.get("connect_timeout")),
            options=dict(options),
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "ConnectionConfig":
        """Read one connection entry from a JSON file (supports ${ENV_VAR})."""
        cfg = cls.from_dict(_read_json(path))
        logger.debug(f"Loaded {cfg.type} connection config from {path}")
        return cfg

    @classmethod
    def from_env(cls, prefix: str = "CONNSTR_") -> "ConnectionConfig":
        """
        Env contract:
          {P}DB_TYPE (required), {P}DB_HOST, {P}DB_PORT, {P}DB_USER, {P}DB_PASSWORD,
          {P}DB_NAME, {P}DB_CONNECT_TIMEOUT, {P}DB_OPTIONS (JSON object)
        Set USE_DOTENV=true to read a .env file first.
        """
        load_dotenv_if_enabled()
        get = os.getenv

        options_str = get(prefix + "DB_OPTIONS")
        options = {}
        if options_str:
            try:
                options = json.loads(options_str)
            except json.JSONDecodeError as e:
                raise ConnStrConfigurationError(f"{prefix}DB_OPTIONS is not valid JSON: {e}") from e

        parts = {
            "type": get(prefix + "DB_TYPE"),
            "host": get(prefix + "DB_HOST"),
            "port": get(prefix + "DB_PORT"),
            "user": get(prefix + "DB_USER"),
            "password": get(prefix + "DB_PASSWORD"),
            "database": get(prefix + "DB_NAME"),
            "connect_timeout": get(prefix + "DB_CONNECT_TIMEOUT"),
            "options": options,
        }
        # drop Nones; validation happens in from_dict
        cfg = cls.from_dict({k: v for k, v in parts.items() if v is not None})
        logger.debug(f"Loaded {cfg.type} connection config from environment ({prefix}*)")
        return cfg

    def builder(self):
        """Return the dialect builder populated from this config."""
        dialect = get_dialect(self.type)
        if dialect is None:
            raise ConnStrConfigurationError(f"No dialect registered for type={self.type!r}")
        data = {
            "host": self.host, "port": self.port, "user": self.user,
            "password": self.password, "database": self.database,
            "connect_timeout": self.connect_timeout, "options": self.options,
        }
        try:
            return dialect.from_config(data)
        except ConnStrConfigurationError:
            raise
        except (TypeError, ValueError) as e:
            raise ConnStrConfigurationError(f"Invalid options for {self.type}: {e}") from e

    def as_connection_string(self) -> str:
        return self.builder().build()
