# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderSession - the mutable state behind an SSRBuilder."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .builder import SSRBuilder
    from .node import VNode

DefaultCallback = Callable[['SSRBuilder'], None]


class SessionState(enum.Enum):
    """EMPTY: nothing created yet. BUILDING: a root exists."""

    EMPTY = 'empty'
    BUILDING = 'building'


@dataclass
class BuilderSession:
    """Root, cursor and default callbacks of one tree construction.

    Attributes:
        root: First node created in the session; never replaced until
            the session is discarded.
        current: The node builder commands operate on.
        callbacks: Default callbacks, in registration order. Stored as dict
            keys so each callback is registered at most once.
    """

    root: VNode | None = None
    current: VNode | None = None
    callbacks: dict[DefaultCallback, None] = field(default_factory=dict)

    @property
    def state(self) -> SessionState:
        if self.root is None:
            return SessionState.EMPTY
        return SessionState.BUILDING

    def register(self, callback: DefaultCallback) -> None:
        self.callbacks.setdefault(callback, None)

    def unregister(self, callback: DefaultCallback) -> None:
        self.callbacks.pop(callback, None)

    def adopt(self, node: VNode) -> None:
        """Make ``node`` current, and root if the session has none."""
        self.current = node
        if self.root is None:
            self.root = node
