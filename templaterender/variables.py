"""
Variable bindings shared between a renderer and the templates it evaluates.
"""

from typing import Any, Dict, Iterator, Mapping, Optional

from templaterender.formatting import FormatValues, format_var


class VariableStore:
    """
    Name -> value mapping used by one renderer.

    Values are whatever the caller stores: strings, numbers, lists or dicts.
    Only string values can be passed through ``format_var``.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._store: Dict[str, Any] = {}
        if initial:
            self.set_all(initial)

    def set(self, name: str, value: Any):
        """Insert or overwrite a variable."""
        self._store[name] = value

    def get(self, name: str, format_args: Optional[FormatValues] = None) -> Any:
        """
        Return the value of ``name``, or None when it is not set.

        When ``format_args`` is given (even empty) the stored string is
        returned formatted with it; the stored value is left untouched.
        """
        if name not in self._store:
            return None
        value = self._store[name]
        if format_args is None:
            return value
        return format_var(value, format_args)

    def has(self, name: str) -> bool:
        return name in self._store

    def unset(self, name: str):
        """Remove ``name``; does nothing when it is not set."""
        self._store.pop(name, None)

    def set_all(self, values: Mapping[str, Any]):
        for name, value in values.items():
            self.set(name, value)

    def all(self) -> Dict[str, Any]:
        """Return a snapshot of every binding."""
        return dict(self._store)

    def fill(self, name: str, values: FormatValues):
        """Replace the value of ``name`` with its formatted version, if set."""
        if name in self._store:
            self._store[name] = format_var(self._store[name], values)

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._store))
