# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Default callbacks for SSRBuilder.

A default callback is any callable taking the builder. It runs right after
each ``create()``, while the new node is current.

Example:
    >>> ui = SSRBuilder().register_default_callback(exponent)
    >>> list(ui.create('div').e.class_list)
    ['exponent', 'exponent-div']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Sequence

if TYPE_CHECKING:
    from .builder import SSRBuilder

TagClassMap = Mapping[str, Sequence[str] | str]

EXPONENT_CSS_CLASS_MAP: dict[str, tuple[str, ...]] = {
    'div': ('exponent', 'exponent-div'),
    'button': ('exponent', 'exponent-button'),
    'canvas': ('exponent', 'exponent-canvas'),
    'input': ('exponent', 'exponent-input'),
    'body': ('exponent', 'exponent-body'),
    'span': ('exponent',),
}

# Rules backing the exponent classes, for a <style> node.
EXPONENT_STYLESHEET: dict[str, dict[str, str]] = {
    '.exponent-body': {
        'top': '0',
        'left': '0',
        'width': '100vw',
        'height': '100vh',
        'margin': '0',
        'padding': '0',
        'overflow': 'hidden',
        'display': 'flex',
    },
    '.exponent': {
        'flex': '1',
        'color': 'inherit',
    },
    '.exponent-div': {
        'display': 'flex',
    },
    '.exponent-button': {
        'border': 'none',
        'cursor': 'pointer',
    },
    '.exponent-canvas': {
        'minWidth': '0',
    },
    '.exponent-input': {
        'minWidth': '0',
        'minHeight': '0',
    },
}


class TagClassInjector:
    """Default callback adding fixed classes to nodes by tag name.

    Tags missing from the table are left untouched.

    Args:
        class_map: Tag name -> class names to add. A plain string value is
            a single class name.
    """

    __slots__ = ('class_map',)

    def __init__(self, class_map: TagClassMap) -> None:
        self.class_map: dict[str, tuple[str, ...]] = {
            tag: (names,) if isinstance(names, str) else tuple(names)
            for tag, names in class_map.items()
        }

    def __call__(self, builder: SSRBuilder) -> None:
        names = self.class_map.get(builder.e.tag_name)
        if not names:
            return
        builder.classes(*names)

    def __repr__(self) -> str:
        return f"TagClassInjector({sorted(self.class_map)!r})"


exponent = TagClassInjector(EXPONENT_CSS_CLASS_MAP)
