"""Enumerations described by a text spec, mapping keys to names and back."""

from __future__ import annotations

from typing import ClassVar

__all__ = ["NULL", "SuperEnum", "SuperEnumValue", "super_enum"]

NULL = -1
_NULL_NAME = "Null"
_INVALID_NAME = "Invalid"


def _parse_int(text: str) -> int:
    base = 16 if text.startswith(("0x", "0X")) else 10
    try:
        return int(text, base)
    except ValueError:
        return 0


class SuperEnum:
    """Key/name table built from a spec such as ``"A, B = 5, C"``.

    Entries without an explicit value take the previous value plus one,
    starting from zero. Values may be decimal or ``0x``-prefixed hexadecimal.
    """

    Null: ClassVar[int] = NULL

    def __init__(self, value: str) -> None:
        self._values: dict[int, str] = {}
        current = 0
        for entry in value.split(","):
            name, sep, number = entry.partition("=")
            if sep:
                current = _parse_int(number.strip())
            self._values[current] = name.strip()
            current += 1

    def key_to_string(self, value: int) -> str:
        """Return the name for *value*, ``"Null"`` for -1 or ``"Invalid"`` if unknown."""
        if value == NULL:
            return _NULL_NAME
        return self._values.get(value, _INVALID_NAME)

    def string_to_key(self, name: str) -> int:
        """Return the key for *name*, or -1 when it is ``"Null"`` or unknown."""
        if name == _NULL_NAME:
            return NULL
        return next((key for key, item in self._values.items() if item == name), NULL)

    def items(self) -> list[tuple[int, str]]:
        """Return the ``(key, name)`` pairs in definition order."""
        return list(self._values.items())


class SuperEnumValue:
    """An integer value tied to a :class:`SuperEnum` table."""

    NULL: ClassVar[int] = NULL
    _table: ClassVar[SuperEnum] = SuperEnum("")

    def __init__(self, value: int | str | SuperEnumValue = NULL) -> None:
        if isinstance(value, SuperEnumValue):
            self._data = value._data
        elif isinstance(value, str):
            self._data = self._table.string_to_key(value)
        else:
            self._data = int(value)

    def to_string(self) -> str:
        return self._table.key_to_string(self._data)

    def to_int(self) -> int:
        return self._data

    def __int__(self) -> int:
        return self._data

    def __index__(self) -> int:
        return self._data

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SuperEnumValue):
            return self._data == other._data
        if isinstance(other, int):
            return self._data == other
        if isinstance(other, str):
            return self.to_string() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)


def super_enum(name: str, spec: str) -> type[SuperEnumValue]:
    """Create a value class named *name* whose constants are defined by *spec*."""
    table = SuperEnum(spec)
    attrs: dict[str, object] = {"_table": table, "__doc__": f"Enumeration {name}: {spec}"}
    for key, item in table.items():
        if item.isidentifier():
            attrs[item] = key
    return type(name, (SuperEnumValue,), attrs)