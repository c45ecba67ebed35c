"""
String interpolation for stored template variables.

A value is filled in two phases: first the named ``@@key@@`` placeholders,
then printf-style positional directives (``%s``, ``%d`` ...) with whatever
values are left over.
"""

import re
from collections import abc
from typing import Any, List, Mapping, Sequence, Tuple, Union

from templaterender.exceptions import FormatError

DELIMITER = "@@"

# %[flags][width][.precision][length]type, or a literal %%
_DIRECTIVE = re.compile(
    r"%(?P<literal>%)?"
    r"(?(literal)|[-+ #0]*\d*(?:\.\d*)?[hlL]?(?P<type>[diouxXeEfFgGcrsa]))"
)
_NUMERIC_KEY = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

FormatValues = Union[Mapping[Any, Any], Sequence[Any]]


def is_numeric_key(key: Any) -> bool:
    """Return True for keys that count as positional (ints, floats, "3", "1.5", "1e3")."""
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return isinstance(key, str) and bool(_NUMERIC_KEY.match(key.strip()))


def split_values(values: FormatValues) -> Tuple[List[Tuple[str, Any]], List[Any]]:
    """Split ``values`` into (named pairs, positional values), keeping order."""
    if isinstance(values, abc.Mapping):
        named = []
        positional = []
        for key, value in values.items():
            if is_numeric_key(key):
                positional.append(value)
            else:
                named.append((str(key), value))
        return named, positional
    if isinstance(values, (str, bytes)):
        return [], [values]
    return [], list(values)


def count_directives(template: str) -> int:
    """Count positional directives in ``template``, ignoring ``%%``."""
    return sum(1 for match in _DIRECTIVE.finditer(template) if not match.group("literal"))


def format_var(template: str, values: FormatValues, delimiter: str = DELIMITER) -> str:
    """
    Fill ``template`` with ``values``.

    Named entries replace every ``@@key@@`` marker. Numeric-keyed (or
    sequence) entries are then applied as positional printf arguments; the
    number of directives must match the number of those arguments.
    """
    if not isinstance(template, str):
        raise FormatError(f"Only strings can be formatted, got {type(template).__name__}")
    if not values:
        return template

    named, positional = split_values(values)
    result = template
    for key, value in named:
        result = result.replace(f"{delimiter}{key}{delimiter}", str(value))

    if not positional:
        return result

    expected = count_directives(result)
    if expected != len(positional):
        raise FormatError(
            f"Format string expects {expected} argument(s), {len(positional)} given"
        )
    try:
        return result % tuple(positional)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"Cannot format {result!r}: {exc}") from exc
