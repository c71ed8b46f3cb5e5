from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from connstrgen.utils.encoding import quote_value

logger = logging.getLogger(__name__)

# connectRetryInterval accepted range (seconds)
MIN_CONNECT_RETRY_INTERVAL = 1
MAX_CONNECT_RETRY_INTERVAL = 60


@dataclass(frozen=True)
class SqlServerConnectionString:
    """
    Microsoft SQL Server connection string: ``key1=value1;key2=value2;...``

    All settings, including user, password and server, are entries of one
    parameter mapping. Every setter goes through dangerously_set_parameter,
    which stores the key verbatim and quotes the value when required.
    Instances are immutable; every setter returns a new instance.

    Usage:
        conn_str = (SqlServerConnectionString()
                    .set_username_and_password("user", "password")
                    .set_host_with_port("localhost", 1433)
                    .set_database_name("db_name")
                    .set_connect_timeout(30)
                    .enable_encryption_and_trust_server_certificate())
        conn_str.build()
    """
    # read-only view over a private copy; only dangerously_set_parameter can fill it
    parameters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}),
                                          init=False, hash=False)

    def dangerously_set_parameter(self, key: str, value: str) -> "SqlServerConnectionString":
        """
        Set ANY parameter, even one that is not known to this builder.

        The value is quoted if required; the key is stored as given.
        """
        parameters = dict(self.parameters)
        parameters[key] = quote_value(value)
        return self._with_parameters(parameters)

    def set_username_without_password(self, username: str) -> "SqlServerConnectionString":
        """Set ``user`` and remove ``password`` if it was set before."""
        conn_str = self.dangerously_set_parameter("user", username)
        parameters = dict(conn_str.parameters)
        parameters.pop("password", None)
        return conn_str._with_parameters(parameters)

    def set_username_and_password(self, username: str, password: str) -> "SqlServerConnectionString":
        return (self.dangerously_set_parameter("user", username)
                .dangerously_set_parameter("password", password))

    def set_host_with_default_port(self, host: str) -> "SqlServerConnectionString":
        return self.dangerously_set_parameter("server", host)

    def set_host_with_port(self, host: str, port: int) -> "SqlServerConnectionString":
        """Set ``server=<host>,<port>``; the joined string is quoted as one value."""
        return self.dangerously_set_parameter("server", f"{host},{port}")

    def enable_encryption(self) -> "SqlServerConnectionString":
        return self.dangerously_set_parameter("encrypt", "true")

    def enable_encryption_and_trust_server_certificate(self) -> "SqlServerConnectionString":
        """
        Enable encryption and trust the server certificate, even when it is
        not normally trusted (self-signed, untrusted root CA, ...).
        """
        return (self.enable_encryption()
                .dangerously_set_parameter("trustServerCertificate", "true"))

    def set_database_name(self, db_name: str) -> "SqlServerConnectionString":
        return self.dangerously_set_parameter("database", db_name)

    def set_connect_timeout(self, connect_timeout: int) -> "SqlServerConnectionString":
        """Set ``timeout`` (seconds). Negative values are ignored."""
        if connect_timeout < 0:
            return self
        return self.dangerously_set_parameter("timeout", str(connect_timeout))

    def set_command_timeout(self, command_timeout: int) -> "SqlServerConnectionString":
        """Set ``command timeout`` (seconds). Negative values are ignored."""
        if command_timeout < 0:
            return self
        return self.dangerously_set_parameter("command timeout", str(command_timeout))

    def set_connect_retry_count(self, connect_retry_count: int) -> "SqlServerConnectionString":
        return self.dangerously_set_parameter("connectRetryCount", str(connect_retry_count))

    def set_connect_retry_interval(self, connect_retry_interval: int) -> "SqlServerConnectionString":
        """Set ``connectRetryInterval`` (seconds), clipped to the range 1..60."""
        connect_retry_interval = min(max(MIN_CONNECT_RETRY_INTERVAL, connect_retry_interval),
                                     MAX_CONNECT_RETRY_INTERVAL)
        return self.dangerously_set_parameter("connectRetryInterval", str(connect_retry_interval))

    def _with_parameters(self, parameters: Mapping[str, str]) -> "SqlServerConnectionString":
        conn_str = replace(self)
        object.__setattr__(conn_str, "parameters", MappingProxyType(dict(parameters)))
        return conn_str

    def build(self) -> str:
        """Render the connection string. Parameter order is not guaranteed."""
        logger.debug(f"Built sqlserver connection string with {len(self.parameters)} parameter(s)")
        return ";".join(f"{key}={value}" for key, value in self.parameters.items())

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        shown = {key: ("***" if key == "password" else value) for key, value in self.parameters.items()}
        return f"{type(self).__name__}(parameters={shown!r})"
