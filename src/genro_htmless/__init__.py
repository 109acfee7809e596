# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Htmless - Virtual document trees with streaming serialization.

A lightweight, zero-dependency library to build HTML-like trees on the
server with a fluent builder and stream them out fragment by fragment,
for the Genro ecosystem (Genro Kyō).

Example:
    >>> from genro_htmless import SSRBuilder, exponent
    >>> ui = SSRBuilder().register_default_callback(exponent)
    >>> html = ui.create('html').e
    >>> ui.create('body').mount(html)
    >>> ui.output_stream(response.write)
"""

__version__ = "0.1.0"

from .builder import SSRBuilder
from .containers import ClassList, StyleMap
from .css import css_declaration_to_string, stylesheet_to_string
from .defaults import EXPONENT_CSS_CLASS_MAP, TagClassInjector, exponent
from .exceptions import EmptySessionError, HtmlessError
from .node import VNode
from .session import BuilderSession, SessionState

__all__ = [
    # Core classes
    "VNode",
    "ClassList",
    "StyleMap",
    # Builder
    "SSRBuilder",
    "BuilderSession",
    "SessionState",
    # Default callbacks
    "TagClassInjector",
    "EXPONENT_CSS_CLASS_MAP",
    "exponent",
    # CSS
    "css_declaration_to_string",
    "stylesheet_to_string",
    # Exceptions
    "HtmlessError",
    "EmptySessionError",
]
