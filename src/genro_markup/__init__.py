# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Fluent builder for HTML markup.

A lightweight, zero-dependency library that assembles markup from a mutable
tree of elements and renders it to text in one pass.

Example:
    >>> from genro_markup import tag
    >>> tag('p').add_class('lead').set_children('Hello').render()
    '<p class="lead">Hello</p>'
"""

__version__ = "0.1.0"

from .doctypes import DOCTYPES, HTML5, resolve_doctype
from .document import Document, document
from .element import Element, ElementCollection, apply_attrs
from .exceptions import ElementAttributeError, MarkupError
from .helper import DocumentHelper, page
from .meta import MetaElement, meta
from .tags import TagFactory, tag
from .wrapper import ElementWrapper

__all__ = [
    # Elements
    "Element",
    "ElementCollection",
    "ElementWrapper",
    "TagFactory",
    "tag",
    "apply_attrs",
    # Meta
    "MetaElement",
    "meta",
    # Documents
    "Document",
    "document",
    "DocumentHelper",
    "page",
    "DOCTYPES",
    "HTML5",
    "resolve_doctype",
    # Exceptions
    "MarkupError",
    "ElementAttributeError",
]
