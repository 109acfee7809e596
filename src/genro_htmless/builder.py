# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SSRBuilder - fluent builder for VNode trees."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from .css import DeclarationFormatter, css_declaration_to_string, stylesheet_to_string
from .exceptions import EmptySessionError
from .node import VNode
from .serializer import Sink
from .session import BuilderSession, DefaultCallback, SessionState

logger = logging.getLogger(__name__)

STYLESHEET_TAG = 'style'


class SSRBuilder:
    """Stateful, chainable builder for server-side rendered documents.

    The builder keeps a cursor, ``current``, over the tree being built.
    ``create()`` makes a new node current (and root, the first time in a
    session); every other command works on the current node and returns
    the builder, so calls chain:

        >>> ui = SSRBuilder()
        >>> html = ui.create('html').e
        >>> body = ui.create('body').mount(html).e
        >>> ui.create('div', 'main', 'box').text_content('hi').mount(body)
        >>> ui.to_html()
        '<html ><body ><div id="main"  class="box " >hi</div></body></html>'

    Default callbacks registered with ``register_default_callback`` run
    after every ``create()`` and receive the builder, so they can decorate
    the freshly created node through the same fluent API (see
    ``genro_htmless.defaults.exponent``).

    A builder is not meant to be shared between concurrent renders: each
    render owns a builder, or completes and ``clear()``s it before the next
    one starts.

    Attributes:
        formatter: Declaration formatter used by ``style()`` on stylesheet
            nodes.
    """

    __slots__ = ('_session', 'formatter')

    def __init__(
        self,
        formatter: DeclarationFormatter = css_declaration_to_string,
        callbacks: Iterable[DefaultCallback] = (),
    ) -> None:
        """Initialize an empty builder.

        Args:
            formatter: Declaration formatter for stylesheet rules.
            callbacks: Default callbacks to register right away.
        """
        self.formatter = formatter
        self._session = BuilderSession()
        for cb in callbacks:
            self._session.register(cb)

    def __repr__(self) -> str:
        return f"SSRBuilder(state={self.state.value}, current={self._session.current!r})"

    # Session

    @property
    def session(self) -> BuilderSession:
        """The current session object."""
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def root(self) -> VNode | None:
        return self._session.root

    @property
    def current(self) -> VNode | None:
        """The node commands operate on, or None in an empty session."""
        return self._session.current

    @property
    def e(self) -> VNode:
        """The current node. Raises EmptySessionError if there is none."""
        return self._require_current()

    def clear(self) -> SSRBuilder:
        """Discard root, current node and all default callbacks."""
        logger.debug("SSRBuilder session cleared (was %s)", self.state.value)
        self._session = BuilderSession()
        return self

    def _require_current(self) -> VNode:
        node = self._session.current
        if node is None:
            raise EmptySessionError(
                "No current node: call create() or ref() first"
            )
        return node

    # Default callbacks

    def register_default_callback(self, callback: DefaultCallback) -> SSRBuilder:
        """Run ``callback(builder)`` after every subsequent create()."""
        self._session.register(callback)
        return self

    def unregister_default_callback(self, callback: DefaultCallback) -> SSRBuilder:
        self._session.unregister(callback)
        return self

    @property
    def default_callbacks(self) -> tuple[DefaultCallback, ...]:
        """Registered callbacks, in registration order."""
        return tuple(self._session.callbacks)

    # Creation and cursor

    def create(
        self,
        tag: str,
        element_id: str | None = None,
        *class_names: str,
    ) -> SSRBuilder:
        """Create a node and make it current.

        The first node created in a session also becomes the root. The new
        node is not attached anywhere: use ``mount()``.

        Args:
            tag: Element type.
            element_id: Optional id; empty strings are ignored.
            *class_names: Classes to add before default callbacks run.
        """
        node = VNode(tag)
        if element_id:
            node.id = element_id
        self._session.adopt(node)

        if class_names:
            node.class_list.add(*class_names)

        for cb in tuple(self._session.callbacks):
            cb(self)

        return self

    def ref(self, node: VNode) -> SSRBuilder:
        """Point the cursor at an existing node. Root is not affected."""
        self._session.current = node
        return self

    # Current node mutators

    def classes(self, *names: str) -> SSRBuilder:
        self._require_current().class_list.add(*names)
        return self

    def classes_remove(self, *names: str) -> SSRBuilder:
        self._require_current().class_list.remove(*names)
        return self

    def id(self, element_id: str) -> SSRBuilder:
        self._require_current().id = element_id
        return self

    def text_content(self, text: str) -> SSRBuilder:
        self._require_current().text_content = text
        return self

    def attrs(self, attributes: Mapping[str, str]) -> SSRBuilder:
        """Set several attributes on the current node, in mapping order."""
        node = self._require_current()
        for key, value in attributes.items():
            node.set_attribute(key, value)
        return self

    def has_attr(self, name: str) -> bool:
        return self._require_current().has_attribute(name)

    def remove_attr(self, name: str) -> SSRBuilder:
        self._require_current().remove_attribute(name)
        return self

    def mount(self, parent: VNode) -> SSRBuilder:
        """Append the current node to ``parent``."""
        parent.append_child(self._require_current())
        return self

    def unmount(self) -> SSRBuilder:
        """Detach the current node from its parent, if it has one."""
        self._require_current().remove()
        return self

    def style(self, styles: Mapping[str, Any]) -> SSRBuilder:
        """Apply styles to the current node.

        On a ``<style>`` node ``styles`` is a stylesheet: each key is a
        selector mapped to declarations, or an ``@keyframes name`` key mapped
        to keyframe selectors. The rendered CSS is appended to the node's
        text, so repeated calls accumulate.

        On any other node ``styles`` is merged into the inline style.

        Example:
            >>> ui.create('style').style({'body': {'color': 'red'}})
            >>> ui.e.text_content
            'body { color: red; } '
            >>> ui.create('div').style({'color': 'red'})
            >>> ui.e.style.as_dict()
            {'color': 'red'}
        """
        node = self._require_current()
        if node.tag_name == STYLESHEET_TAG:
            node.text_content += stylesheet_to_string(styles, self.formatter)
        else:
            node.style.update(styles)
        return self

    # Output

    def _require_root(self) -> VNode:
        root = self._session.root
        if root is None:
            raise EmptySessionError("Nothing to output: no node was created")
        return root

    def output_stream(self, sink: Sink) -> None:
        """Serialize the whole tree from the root, one fragment per call."""
        self._require_root().output_stream(sink)

    def iter_chunks(self) -> Iterator[str]:
        """Generator over the root's fragments.

        The root is looked up immediately, so an empty session raises here
        rather than on first iteration.
        """
        return self._require_root().iter_chunks()

    def to_html(self) -> str:
        return self._require_root().to_html()
