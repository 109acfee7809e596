# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Htmless exceptions."""

from __future__ import annotations


class HtmlessError(Exception):
    """Base exception for Htmless errors."""

    pass


class EmptySessionError(HtmlessError):
    """Raised when a builder command needs a node but the session is empty.

    Covers every command that operates on the current node, and output
    requested before any node was created.
    """

    pass
