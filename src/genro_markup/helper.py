# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DocumentHelper - shortcuts for the usual head and body insertions.

Example:
    A complete page::

        from genro_markup import page, tag

        html = (
            page()
            .set_language('en')
            .set_title('Dashboard')
            .add_stylesheet('/static/app.css')
            .set_body({'id': 'app'}, tag.header(), tag.main())
            .add_script('/static/app.js', attrs={'defer': True})
            .render()
        )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .document import Document
from .element import Element, apply_attrs
from .tags import DEFAULT_SCRIPT_TYPE, tag
from .wrapper import ElementWrapper


class DocumentHelper(ElementWrapper):
    """Cover class over a Document with helpers for common content.

    Every Document operation (append_head, set_doctype, set_language, ...)
    is available on the helper and returns the helper, so the two kinds of
    call can be mixed in one chain.
    """

    def __init__(self, document: Document | None = None) -> None:
        """Wrap an existing document, or a new empty one."""
        super().__init__(document if document is not None else Document())

    @property
    def document(self) -> Document:
        """The wrapped Document."""
        return self._target

    @property
    def doctype(self) -> str:
        """The wrapped document's doctype declaration."""
        return self._target.doctype

    @doctype.setter
    def doctype(self, value: str) -> None:
        self._target.doctype = value

    def set_title(self, text: str) -> DocumentHelper:
        """Append ``<title>`` to head.

        A second call adds a second title; earlier titles are kept.
        """
        self._target.append_head(tag.title(text))
        return self

    def add_link(
        self, rel: str, href: str, attrs: Mapping[str, Any] | None = None
    ) -> DocumentHelper:
        """Append ``<link rel="..." href="..." />`` to head.

        Args:
            rel: Relationship, e.g. 'icon' or 'preload'.
            href: Relative or absolute URL.
            attrs: Extra attributes, applied after rel and href.
        """
        link = tag.link().set_attribute('rel', rel).set_attribute('href', href)
        apply_attrs(link, attrs)
        self._target.append_head(link)
        return self

    def add_stylesheet(
        self, href: str, attrs: Mapping[str, Any] | None = None
    ) -> DocumentHelper:
        """Append ``<link rel="stylesheet" href="..." />`` to head."""
        return self.add_link('stylesheet', href, attrs)

    def add_script(
        self,
        src: str,
        mime_type: str = DEFAULT_SCRIPT_TYPE,
        attrs: Mapping[str, Any] | None = None,
    ) -> DocumentHelper:
        """Append ``<script type="..." src="..."></script>`` to body.

        Args:
            src: Relative or absolute URL of the script.
            mime_type: Value of the type attribute.
            attrs: Extra attributes, applied after type and src.
        """
        script = tag.script(mime_type).set_attribute('src', src)
        apply_attrs(script, attrs)
        self._target.append_body(script)
        return self

    def add_inline_script(
        self,
        body: str,
        attrs: Mapping[str, Any] | None = None,
        call_args: Iterable[Any] = (),
    ) -> DocumentHelper:
        """Append a script that immediately invokes the given function text.

        The script text is ``(<body>)(<call_args joined by ", ">)``.

        Args:
            body: Function expression source, inserted verbatim.
            attrs: Extra attributes. A truthy ``type`` entry replaces the
                default script type.
            call_args: Arguments written into the call, converted with str().

        Example:
            add_inline_script("function(a,b){return a+b}", call_args=[1, 2])
            appends <script ...>(function(a,b){return a+b})(1, 2)</script>
        """
        mime_type = DEFAULT_SCRIPT_TYPE
        if isinstance(attrs, Mapping) and attrs.get('type'):
            mime_type = attrs['type']

        script = tag.script(mime_type).set_attribute('charset', 'utf-8')
        apply_attrs(script, attrs)
        arguments = ', '.join(str(arg) for arg in call_args)
        script.set_children(f'({body})({arguments})')
        self._target.append_body(script)
        return self

    def set_body(
        self, attrs: Mapping[str, Any] | None = None, *content: Any
    ) -> DocumentHelper:
        """Prepend a ``<div>`` container to body.

        Args:
            attrs: Attributes of the div. Without them the div is added
                empty and content is not used.
            *content: Children of the div.
        """
        container = Element('div')
        if attrs is not None:
            apply_attrs(container, attrs)
            if content:
                container.set_children(*content)

        self._target.prepend_body(container)
        return self


def page() -> DocumentHelper:
    """Create a DocumentHelper with the HTML5 doctype."""
    return DocumentHelper(Document().set_doctype())
