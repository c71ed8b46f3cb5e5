"""
Utility functions for connstrgen.

Submodules:
- encoding: percent-encoding and quoting of connection string values
- data: coercion of configuration values
"""

from connstrgen.utils.encoding import percent_encode, quote_value, includes_control_char
from connstrgen.utils.data import to_int

__all__ = [
    'percent_encode',
    'quote_value',
    'includes_control_char',
    'to_int',
]
