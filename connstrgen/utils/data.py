"""
Data coercion helpers for connstrgen configuration values.
"""

from connstrgen.exceptions import ConnStrConfigurationError


def to_int(name, value):
    """
    Coerce a config value to int.

    Args:
        name: Field name, used in the error message
        value: Raw value (int, numeric string, None or "")

    Returns:
        The integer, or None for None / ""

    Raises:
        ConnStrConfigurationError: If the value is not an integer
    """
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConnStrConfigurationError(f"Invalid integer for {name}: {value!r}") from e
