# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - an ``<html>`` root with fixed head and body sections.

Example:
    Building a page::

        from genro_markup import document, tag

        doc = document().set_language('en')
        doc.append_head(tag.title('Home'))
        doc.append_body(tag.h(1).set_children('Hi'))
        doc.render()
        # '<!DOCTYPE HTML><html lang="en"><head><title>Home</title></head>'
        # '<body><h1>Hi</h1></body></html>'
"""

from __future__ import annotations

from typing import Any

from .doctypes import HTML5, resolve_doctype
from .element import Element
from .wrapper import ElementWrapper


class Document(ElementWrapper):
    """HTML document with separate head and body elements.

    The root ``<html>`` element always has exactly two children, head and
    body, created here and never replaced. Content is added with the
    append_*/prepend_* methods; the root's own child list is not exposed.

    Attributes:
        doctype: Declaration prepended verbatim to the rendering. Empty
            until set_doctype() is called.
    """

    _exposed = frozenset({'tag', 'attributes', 'set_attribute', 'add_class', 'set_id'})

    def __init__(self) -> None:
        """Create an empty document without a doctype."""
        super().__init__(Element('html'))
        self._head = Element('head')
        self._body = Element('body')
        self._target.append_children(self._head, self._body)
        self._head.pinned = True
        self._body.pinned = True
        self.doctype = ''

    @property
    def head(self) -> Element:
        """The ``<head>`` element."""
        return self._head

    @property
    def body(self) -> Element:
        """The ``<body>`` element."""
        return self._body

    def render(self) -> str:
        return self.doctype + self._target.render()

    # ==================== Head / body ====================

    def append_head(self, *nodes: Any) -> Document:
        self._head.append_children(*nodes)
        return self

    def append_body(self, *nodes: Any) -> Document:
        self._body.append_children(*nodes)
        return self

    def prepend_head(self, *nodes: Any) -> Document:
        self._head.prepend_children(*nodes)
        return self

    def prepend_body(self, *nodes: Any) -> Document:
        self._body.prepend_children(*nodes)
        return self

    # ==================== Root attributes ====================

    def set_namespace(self, uri: str | None = None) -> Document:
        """Set xmlns on the root element."""
        self._target.set_attribute('xmlns', uri)
        return self

    def set_language(self, code: str | None = None) -> Document:
        """Set lang on the root element."""
        self._target.set_attribute('lang', code)
        return self

    def set_doctype(self, version: Any = HTML5) -> Document:
        """Select the doctype declaration.

        Args:
            version: 5 or '5' (HTML5), 'strict', 'transitional' or
                'frameset' (HTML 4.01). Unknown values give HTML5.
        """
        self.doctype = resolve_doctype(version)
        return self


def document(version: Any = HTML5) -> Document:
    """Create a Document with its doctype already set."""
    return Document().set_doctype(version)
