# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Streaming page - Example of building and streaming a document.

A didactic example showing the fluent SSRBuilder API, a custom
default callback and fragment-by-fragment output.

Usage:
    python examples/streaming_page/page.py
"""

from __future__ import annotations

import sys

from genro_htmless import SSRBuilder, TagClassInjector, exponent

# Extra classes for headings, on top of the exponent ones.
headings = TagClassInjector({'h1': ['title'], 'h2': ['subtitle']})


def build_page(items: list[str]) -> SSRBuilder:
    """Build a small page listing ``items``."""
    ui = SSRBuilder(callbacks=[exponent, headings])

    html = ui.create('html').e
    head = ui.create('head').mount(html).e
    ui.create('style', 'page').mount(head).style({
        '.title': {'fontSize': '2em'},
        '@keyframes appear': {
            'from': {'opacity': '0'},
            'to': {'opacity': '1'},
        },
    })

    body = ui.create('body').mount(html).e
    ui.create('h1').text_content('Shopping list').mount(body)
    box = ui.create('div', 'items').style({'animation': 'appear 1s'}).mount(body).e
    for item in items:
        ui.create('span', None, 'item').text_content(item).mount(box)

    return ui


if __name__ == '__main__':
    build_page(['bread', 'milk', 'eggs']).output_stream(sys.stdout.write)
    sys.stdout.write('\n')
