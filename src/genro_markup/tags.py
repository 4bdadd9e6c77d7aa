# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element factories.

The module-level ``tag`` object is both a callable and a namespace of
pre-shaped elements:

    >>> tag('footer').render()
    '<footer></footer>'
    >>> tag.h(2).render()
    '<h2></h2>'
    >>> tag.section().render()
    '<section></section>'

Names without a dedicated method are resolved dynamically, so any tag
name that is a valid Python identifier is available as ``tag.<name>()``.
"""

from __future__ import annotations

from typing import Callable

from .element import DEFAULT_TAG, Element
from .exceptions import ElementAttributeError

DEFAULT_SCRIPT_TYPE = 'application/javascript'


class TagFactory:
    """Callable factory for Elements."""

    def __call__(self, name: str = DEFAULT_TAG) -> Element:
        """Create an element with any tag name."""
        return Element(name)

    def __getattr__(self, name: str) -> Callable[[], Element]:
        """Dynamic factory for any tag without a dedicated method.

        Raises:
            ElementAttributeError: For names starting with '_'.
        """
        if name.startswith('_'):
            raise ElementAttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self._make_factory(name)

    def _make_factory(self, name: str) -> Callable[[], Element]:
        def factory() -> Element:
            return Element(name)

        factory.__name__ = name
        return factory

    def div(self) -> Element:
        return Element('div')

    def h(self, level: int = 1) -> Element:
        """Create a heading element, ``<h1>`` by default."""
        return Element(f'h{level}')

    def title(self, *text: str) -> Element:
        """Create ``<title>`` whose only child is the texts joined by a space."""
        return Element('title').set_children(' '.join(str(part) for part in text))

    def script(self, mime_type: str = DEFAULT_SCRIPT_TYPE) -> Element:
        """Create ``<script>`` with its type attribute set."""
        return Element('script').set_attribute('type', mime_type)

    def link(self) -> Element:
        """Create a self-closing ``<link />``."""
        return Element('link', self_closing=True)


tag = TagFactory()
