"""
SQL parameter binding utilities.

Renders placeholders for every DB-API 2.0 paramstyle and shapes ordered
values into what the driver expects. Named styles use indexed parameter
names (col_0, col_1, ...) so column names with Chinese or special
characters never end up in bind names.
"""

from typing import Dict, List, Sequence, Tuple, Any, Union

POSITIONAL_STYLES = frozenset({"qmark", "numeric", "format"})
NAMED_STYLES = frozenset({"named", "pyformat"})
PARAMSTYLES = POSITIONAL_STYLES | NAMED_STYLES


def param_name(index: int) -> str:
    """Indexed parameter name for named paramstyles."""
    return f"col_{index}"


def placeholder(index: int, paramstyle: str = "qmark") -> str:
    """
    Render the placeholder for the parameter at ``index`` (0-based).

    Examples:
        >>> placeholder(0)
        '?'
        >>> placeholder(2, "numeric")
        ':3'
        >>> placeholder(1, "named")
        ':col_1'
        >>> placeholder(1, "pyformat")
        '%(col_1)s'
    """
    if paramstyle == "qmark":
        return "?"
    if paramstyle == "format":
        return "%s"
    if paramstyle == "numeric":
        return f":{index + 1}"
    if paramstyle == "named":
        return f":{param_name(index)}"
    if paramstyle == "pyformat":
        return f"%({param_name(index)})s"
    raise ValueError(f"Unsupported paramstyle: {paramstyle!r}")


def build_placeholders(count: int, paramstyle: str = "qmark", start: int = 0) -> List[str]:
    """
    Build ``count`` consecutive placeholders beginning at position ``start``.

    ``start`` matters for numbered and named styles, where an UPDATE's WHERE
    placeholders continue after its SET placeholders.

    Examples:
        >>> build_placeholders(2)
        ['?', '?']
        >>> build_placeholders(2, "numeric", start=2)
        [':3', ':4']
    """
    return [placeholder(start + i, paramstyle) for i in range(count)]


def bind_parameters(
    values: Sequence[Any], paramstyle: str = "qmark"
) -> Union[Tuple[Any, ...], Dict[str, Any]]:
    """
    Shape ordered values for the driver.

    Positional styles get a tuple; named styles get a dict keyed by the
    indexed parameter names.

    Examples:
        >>> bind_parameters(["Alice", 30])
        ('Alice', 30)
        >>> bind_parameters(["Alice", 30], "named")
        {'col_0': 'Alice', 'col_1': 30}
    """
    if paramstyle in POSITIONAL_STYLES:
        return tuple(values)
    if paramstyle in NAMED_STYLES:
        return {param_name(i): value for i, value in enumerate(values)}
    raise ValueError(f"Unsupported paramstyle: {paramstyle!r}")
