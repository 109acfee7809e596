# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""VNode - the virtual document element."""

from __future__ import annotations

from typing import Any, Iterator

from .containers import ClassList, StyleMap
from .serializer import Sink, iter_chunks, stream, to_html


class VNode:
    """An element in a virtual document tree.

    Each node has:
    - tag_name: The element type ('div', 'span', ...), fixed at creation
    - id: Optional element id
    - class_list: Ordered, unique class names
    - attributes: Attribute name -> value, insertion ordered
    - style: Inline style declarations
    - children: Owned child nodes, in order
    - text_content: Raw text written right after the opening tag
    - parent: The node this one is appended to, or None

    Example:
        >>> div = VNode('div')
        >>> div.set_attribute('data-x', '1').append_child(VNode('span'))
        VNode('div', children=1)
        >>> div.to_html()
        '<div data-x="1" ><span ></span></div>'
    """

    __slots__ = (
        '_tag_name', 'id', 'class_list', 'attributes', 'style',
        'children', 'text_content', 'parent',
    )

    def __init__(
        self,
        tag_name: str,
        id: str | None = None,
        text_content: str = '',
    ) -> None:
        """Initialize a VNode.

        Args:
            tag_name: The element type.
            id: Optional element id.
            text_content: Optional raw text content.
        """
        self._tag_name = tag_name
        self.id = id
        self.class_list = ClassList()
        self.attributes: dict[str | None, str | None] = {}
        self.style = StyleMap()
        self.children: list[VNode] = []
        self.text_content = text_content
        self.parent: VNode | None = None

    def __repr__(self) -> str:
        return f"VNode({self._tag_name!r}, children={len(self.children)})"

    @property
    def tag_name(self) -> str:
        """The element type. Read-only."""
        return self._tag_name

    # Attributes

    def set_attribute(self, key: str | None, value: str | None) -> VNode:
        """Set an attribute, overwriting any previous value.

        No validation is done here: pairs with a None key or value are
        stored and later skipped by the serializer.
        """
        self.attributes[key] = value
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def remove_attribute(self, key: str) -> VNode:
        self.attributes.pop(key, None)
        return self

    # Tree

    def append_child(self, child: VNode) -> VNode:
        """Append ``child`` as last child of this node.

        A child that already has a parent is detached from it first, so a
        node is never listed under two parents. No cycle check is done.
        """
        if child.parent is not None:
            child.parent.remove_child(child)
        self.children.append(child)
        child.parent = self
        return self

    def remove_child(self, child: VNode) -> VNode:
        """Remove ``child`` (matched by identity). No-op if not a child."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                if child.parent is self:
                    child.parent = None
                break
        return self

    def remove(self) -> None:
        """Detach this node from its parent, if any."""
        if self.parent is not None:
            self.parent.remove_child(self)

    # Output

    def output_stream(self, sink: Sink) -> None:
        """Serialize this node and its subtree, one fragment per sink call."""
        stream(self, sink)

    def iter_chunks(self) -> Iterator[str]:
        """Generator over the serialized fragments."""
        return iter_chunks(self)

    def to_html(self) -> str:
        return to_html(self)

    def walk(self) -> Iterator[VNode]:
        """Yield this node and all descendants, preorder."""
        yield self
        for child in self.children:
            yield from child.walk()
