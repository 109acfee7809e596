# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Streaming serializer for VNode trees.

The tree is walked depth-first (preorder) and written as a sequence of
small text fragments. Nothing is buffered: a fragment is handed over as
soon as it is produced, so memory use depends on tree depth, not on
document size.

Opening tag layout, always in this order::

    <tag id="x"  class="a b " key="value" style="k:v;" >

- ``id`` only when set;
- the class block starts with a space of its own, hence the double space
  after ``id``; every class name is followed by a space;
- attributes whose key or value is None are skipped;
- style properties are written as ``key:value;`` without spaces.

Text content and attribute values are written as given, without escaping.

Two entry points share the same walk:

- ``iter_chunks(node)``: generator, for pull consumers.
- ``stream(node, sink)``: calls ``sink(chunk)`` for each fragment.

Example:
    >>> parts = []
    >>> stream(node, parts.append)
    >>> ''.join(parts) == ''.join(iter_chunks(node))
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    from .node import VNode

Sink = Callable[[str], None]


def iter_open_tag(node: VNode) -> Iterator[str]:
    """Yield the fragments of the opening tag of a single node."""
    yield f"<{node.tag_name} "

    if node.id:
        yield f'id="{node.id}" '

    if node.class_list:
        yield ' class="'
        for name in node.class_list:
            yield f"{name} "
        yield '" '

    for key, value in node.attributes.items():
        if key is None or value is None:
            continue
        yield f'{key}="{value}" '

    if node.style:
        yield 'style="'
        for key, value in node.style.items():
            yield f"{key}:{value};"
        yield '" '

    yield '>'


def iter_chunks(node: VNode) -> Iterator[str]:
    """Yield every fragment of ``node`` and its subtree, in document order."""
    yield from iter_open_tag(node)

    if node.text_content:
        yield node.text_content

    for child in node.children:
        yield from iter_chunks(child)

    yield f"</{node.tag_name}>"


def stream(node: VNode, sink: Sink) -> None:
    """Serialize ``node`` by calling ``sink`` once per fragment.

    Exceptions raised by the sink propagate unchanged and stop the walk.
    """
    for chunk in iter_chunks(node):
        sink(chunk)


def to_html(node: VNode) -> str:
    """Join all fragments into a single string.

    Convenience for tests and small documents; prefer ``stream`` for
    responses.
    """
    return ''.join(iter_chunks(node))
