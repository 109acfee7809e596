# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""CSS text helpers.

Two levels are provided:

- ``css_declaration_to_string``: the declaration formatter. Turns a
  ``{property: value}`` mapping into a ``{ ... }`` declaration block.
- ``stylesheet_to_string``: renders a whole stylesheet mapping (selectors
  and ``@keyframes`` rules) using a declaration formatter.

Property names may be given in camelCase, as in the DOM
``CSSStyleDeclaration`` interface (``backgroundColor``); they are written
as CSS names (``background-color``). Values are written verbatim.

Example:
    >>> css_declaration_to_string({'backgroundColor': 'gray', 'flex': '1'})
    '{ background-color: gray; flex: 1; }'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

DeclarationFormatter = Callable[[Mapping[str, Any]], str]

KEYFRAMES_PREFIX = '@keyframes'

_UPPER = re.compile(r'[A-Z]')


def css_property_name(name: str) -> str:
    """Convert a camelCase property name to its CSS spelling.

    Names already containing a dash (including custom properties such as
    ``--accent``) are returned unchanged. A leading vendor capital, as in
    ``WebkitTransform``, produces the ``-webkit-`` prefix.
    """
    if '-' in name:
        return name
    return _UPPER.sub(lambda m: '-' + m.group(0).lower(), name)


def css_declaration_to_string(decls: Mapping[str, Any]) -> str:
    """Format a declaration mapping as a CSS block.

    Args:
        decls: Mapping of property name to value. ``None`` values are skipped.

    Returns:
        ``'{ name: value; ... }'``, or ``'{ }'`` for an empty mapping.
    """
    body = ''.join(
        f"{css_property_name(key)}: {value}; "
        for key, value in decls.items()
        if value is not None
    )
    return '{ ' + body + '}'


def keyframes_to_string(
    name: str,
    frames: Mapping[str, Mapping[str, Any]],
    formatter: DeclarationFormatter = css_declaration_to_string,
) -> str:
    """Render an ``@keyframes`` rule.

    Args:
        name: The full rule key, e.g. ``'@keyframes fade'``.
        frames: Mapping of keyframe selector (``from``, ``to``, ``50%``)
            to declaration mapping.
        formatter: Declaration formatter for each frame.
    """
    parts = [f"{name} {{ "]
    for selector, decls in frames.items():
        parts.append(f"{selector} {formatter(_as_mapping(selector, decls))} ")
    parts.append('}')
    return ''.join(parts)


def rule_to_string(
    selector: str,
    decls: Mapping[str, Any],
    formatter: DeclarationFormatter = css_declaration_to_string,
) -> str:
    """Render a single ``selector { decls } `` rule (with trailing space)."""
    return f"{selector} {formatter(_as_mapping(selector, decls))} "


def stylesheet_to_string(
    sheet: Mapping[str, Any],
    formatter: DeclarationFormatter = css_declaration_to_string,
) -> str:
    """Render a stylesheet mapping to CSS text.

    Each top-level key is either a selector, whose value is a declaration
    mapping, or a key starting with ``@keyframes``, whose value maps
    keyframe selectors to declaration mappings. Rules are emitted in
    mapping order.

    Raises:
        TypeError: If a rule value is not a mapping.
    """
    out = []
    for key, value in sheet.items():
        if key.startswith(KEYFRAMES_PREFIX):
            out.append(keyframes_to_string(key, _as_mapping(key, value), formatter))
        else:
            out.append(rule_to_string(key, value, formatter))
    return ''.join(out)


def _as_mapping(key: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(
            f"CSS rule '{key}' expects a mapping, got {type(value).__name__}"
        )
    return value
