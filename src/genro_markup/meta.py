# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MetaElement - ``<meta />`` nodes and their common shapes.

Example:
    >>> MetaElement('viewport', 'width=device-width').render()
    '<meta name="viewport" content="width=device-width" />'
    >>> MetaElement.collection({'charset': 'utf-8', 'referrer': 'origin'}).render()
    '<meta charset="utf-8" /><meta name="referrer" content="origin" />'
    >>> meta('robots', attrs={'content': 'noindex', 'data-x': True}).render()
    '<meta name="robots" content="noindex" data-x />'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .element import Element, ElementCollection, apply_attrs
from .tags import tag
from .wrapper import ElementWrapper

DEFAULT_CHARSET = 'utf-8'


class MetaElement(ElementWrapper):
    """A self-closing ``<meta />`` element.

    Owns a plain Element and forwards the whole Element API to it, so
    set_attribute(), add_class() and friends chain on the MetaElement.
    """

    def __init__(self, name: str | None = None, content: Any = None) -> None:
        """Create a meta element.

        Args:
            name: Value of the name attribute. Ignored when empty.
            content: Value of the content attribute. Ignored when empty.
        """
        super().__init__(Element('meta', self_closing=True))
        if name:
            self._target.set_attribute('name', name)
        if content:
            self._target.set_attribute('content', content)

    def set_content(self, value: Any = None) -> MetaElement:
        """Set the content attribute, or remove it when value is None."""
        self._target.set_attribute('content', value)
        return self

    @classmethod
    def charset(cls, charset: str = DEFAULT_CHARSET) -> MetaElement:
        """Create ``<meta charset="..." />``."""
        meta_element = cls()
        meta_element.element.set_attribute('charset', charset)
        return meta_element

    @classmethod
    def http_equiv(cls, equiv: str, content: Any = None) -> MetaElement:
        """Create ``<meta http-equiv="..." content="..." />``."""
        meta_element = cls()
        meta_element.element.set_attribute('http-equiv', equiv)
        return meta_element.set_content(content)

    @classmethod
    def viewport(cls, viewport: str) -> MetaElement:
        return cls('viewport', viewport)

    @classmethod
    def referrer(cls, referrer: str) -> MetaElement:
        return cls('referrer', referrer)

    @staticmethod
    def link() -> Element:
        """Create a self-closing ``<link />``. This is a plain Element."""
        return tag.link()

    @classmethod
    def collection(cls, meta_map: Mapping[str, Any]) -> ElementCollection:
        """Create a list of meta elements from a name -> content mapping.

        A ``charset`` key produces ``<meta charset="..." />`` instead of a
        name/content pair. Order follows the mapping.
        """
        items = []
        for name, content in meta_map.items():
            if name == 'charset':
                items.append(cls.charset(content))
            else:
                items.append(cls(name, content))
        return ElementCollection(items)


def meta(
    name: str | None = None,
    content: Any = None,
    attrs: Mapping[str, Any] | None = None,
) -> MetaElement:
    """Create ``<meta name="..." />`` with content or arbitrary attributes.

    Args:
        name: Value of the name attribute.
        content: Value of the content attribute.
        attrs: Further attributes, applied in order after name and content.
    """
    meta_element = MetaElement(name, content)
    apply_attrs(meta_element, attrs)
    return meta_element
