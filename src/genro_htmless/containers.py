# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Small containers used by VNode: ClassList and StyleMap."""

from __future__ import annotations

from typing import Iterator, Mapping


class ClassList:
    """Ordered set of CSS class names.

    Iteration follows first insertion. Adding a name that is already
    present keeps its original position; removing an unknown name is a
    no-op.

    Example:
        >>> cl = ClassList('a', 'b')
        >>> cl.add('b', 'c').remove('a')
        ClassList(['b', 'c'])
    """

    __slots__ = ('_items',)

    def __init__(self, *items: str) -> None:
        self._items: dict[str, None] = {}
        self.add(*items)

    def add(self, *items: str) -> ClassList:
        """Add one or more class names. Returns self for chaining."""
        for item in items:
            self._items.setdefault(item, None)
        return self

    def remove(self, *items: str) -> ClassList:
        """Remove one or more class names. Returns self for chaining."""
        for item in items:
            self._items.pop(item, None)
        return self

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ClassList):
            return list(self._items) == list(other._items)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ClassList({list(self._items)!r})"


class StyleMap:
    """Inline style declarations: property name -> value.

    Keys are unique and keep insertion order; assigning an existing
    property overwrites its value in place (last write wins).
    """

    __slots__ = ('_decls',)

    def __init__(self, decls: Mapping[str, str] | None = None) -> None:
        self._decls: dict[str, str] = {}
        if decls:
            self.update(decls)

    def update(self, decls: Mapping[str, str]) -> StyleMap:
        """Merge declarations, overwriting existing properties."""
        for key, value in decls.items():
            self._decls[key] = value
        return self

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._decls.get(key, default)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._decls.items())

    def __getitem__(self, key: str) -> str:
        return self._decls[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._decls[key] = value

    def __delitem__(self, key: str) -> None:
        del self._decls[key]

    def __contains__(self, key: object) -> bool:
        return key in self._decls

    def __iter__(self) -> Iterator[str]:
        return iter(self._decls)

    def __len__(self) -> int:
        return len(self._decls)

    def __bool__(self) -> bool:
        return bool(self._decls)

    def as_dict(self) -> dict[str, str]:
        """Return a plain dict copy of the declarations."""
        return dict(self._decls)

    def __repr__(self) -> str:
        return f"StyleMap({self._decls!r})"
