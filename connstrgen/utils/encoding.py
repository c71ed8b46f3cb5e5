"""
Value encoding for connection strings.

This module provides the two escaping functions used by the builders:
- percent_encode: reserved URI characters -> %XX (PostgreSQL URI style)
- quote_value: conditional quoting for semicolon-delimited key/value strings (SQL Server)
"""

import unicodedata

# Reserved characters (https://en.wikipedia.org/wiki/Percent-encoding#Reserved_characters).
# '%' itself is not part of the table and passes through unchanged.
PERCENT_REPLACEMENTS = {
    '!': '%21',
    '#': '%23',
    '$': '%24',
    '&': '%26',
    "'": '%27',
    '(': '%28',
    ')': '%29',
    '*': '%2A',
    '+': '%2B',
    ',': '%2C',
    '/': '%2F',
    ':': '%3A',
    ';': '%3B',
    '=': '%3D',
    '?': '%3F',
    '@': '%40',
    '[': '%5B',
    ']': '%5D',
}

_PERCENT_TABLE = str.maketrans(PERCENT_REPLACEMENTS)


def percent_encode(value):
    """
    Replace reserved characters with their percent-encoded form.

    Every character of the input is translated independently, so an inserted
    escape is never scanned again.

    Args:
        value: Raw string

    Returns:
        Encoded string

    Examples:
        >>> percent_encode("test!")
        'test%21'
        >>> percent_encode("100%")
        '100%'
    """
    return value.translate(_PERCENT_TABLE)


def includes_control_char(value):
    """Check if the string contains a Unicode control character (category Cc)."""
    return any(unicodedata.category(ch) == 'Cc' for ch in value)


def quote_value(value):
    """
    Quote a value for a SQL Server connection string, only if required.

    According to Microsoft's ADO.NET connection string documentation:
    a value containing a semicolon, Unicode control characters, or leading or
    trailing white space must be enclosed in single or double quotation marks.
    The enclosing character may not occur within the value it encloses,
    unless it is escaped by doubling it.

    Double quotation marks are preferred:
    - no '"' in the value: enclose in '"'
    - '"' but no "'" in the value: enclose in "'"
    - both present: double every '"' and enclose in '"'

    Args:
        value: Raw string

    Returns:
        The value unchanged, or a quoted copy of it

    Examples:
        >>> quote_value("localhost")
        'localhost'
        >>> quote_value("a;a")
        '"a;a"'
        >>> quote_value(" a")
        '" a"'
    """
    quotes_needed = (
        includes_control_char(value)
        or value.startswith(' ')
        or value.endswith(' ')
        or ';' in value
    )
    if not quotes_needed:
        return value

    if '"' not in value:
        return f'"{value}"'

    if "'" not in value:
        return f"'{value}'"

    escaped = value.replace('"', '""')
    return f'"{escaped}"'
