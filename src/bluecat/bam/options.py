"""Serialisation of BAM option and property strings.

Many v1 methods take a single ``options`` or ``properties`` argument holding
``name=value`` pairs joined with ``|``, for example::

    hint=^abc|retrieveFields=false

Callers pass a mapping and the client produces the wire string. The grammar
inside each value belongs to the server; values are not escaped or checked.
"""

from collections.abc import Iterable, Mapping
from typing import Any

OPTION_SEPARATOR = "|"

OptionsArg = Mapping[str, Any] | str | None


def format_option_value(value: Any) -> str:
    """Render one option value the way the v1 API spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, list | tuple):
        return ",".join(format_option_value(v) for v in value)
    return str(value)


def encode_options(options: OptionsArg) -> str:
    """
    Build a ``name=value|name=value`` string.

    Args:
        options: Mapping of option names to values. An already encoded string
            is returned unchanged and ``None`` gives an empty string.

    Returns:
        Wire format options string (insertion order is preserved).

    Example:
        >>> encode_options({"hint": "^abc", "retrieveFields": False})
        'hint=^abc|retrieveFields=false'
    """
    if options is None:
        return ""
    if isinstance(options, str):
        return options
    return OPTION_SEPARATOR.join(
        f"{name}={format_option_value(value)}" for name, value in options.items()
    )


def join_values(values: Iterable[str] | str | None, separator: str) -> str:
    """Join a list-valued parameter such as ``types`` or ``optionTypes``."""
    if values is None:
        return ""
    if isinstance(values, str):
        return values
    return separator.join(values)
