# connstrgen/__init__.py
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .models import UsernamePassword, HostPort
from .dialect import PostgresConnectionString, SqlServerConnectionString, get_builder
from .drivers import Dialect, register_dialect, get_dialect
from .config import ConnectionConfig
from .exceptions import ConnStrConfigurationError

__all__ = [
    'UsernamePassword',
    'HostPort',
    'PostgresConnectionString',
    'SqlServerConnectionString',
    'get_builder',
    'Dialect',
    'register_dialect',
    'get_dialect',
    'ConnectionConfig',
    'ConnStrConfigurationError',
]
