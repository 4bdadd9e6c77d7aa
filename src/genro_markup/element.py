# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - the mutable markup node.

An Element is a named node with an ordered dict of attributes and an
ordered list of children. Children can be other Elements, objects that own
an Element (MetaElement, Document), ElementCollections or plain strings.
Every mutating method returns the element itself, so calls can be chained.

Example:
    Building a small tree::

        from genro_markup import Element

        nav = Element('nav').set_id('main').add_class(['menu', 'dark'])
        nav.append_children(
            Element('a').set_attribute('href', '/').set_children('Home'),
            Element('a').set_attribute('href', '/about').set_children('About'),
        )
        str(nav)
        # '<nav id="main" class="menu dark"><a href="/">Home</a>...</nav>'

Ownership:
    An Element has at most one parent. Inserting an element that already
    sits under another parent moves it: it is removed from the old parent
    first. Strings and ElementCollections are not tracked. A pinned element,
    such as a document's head or body, is never moved once attached.

Rendering performs no escaping: attribute values and text children are
emitted verbatim.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TAG = 'div'

# Only the first run is replaced
_TAG_SEPARATORS = re.compile(r'[\s/\\]+')


def normalize_tag(name: str) -> str:
    """Collapse the first run of whitespace or slashes into a hyphen.

    Examples:
        >>> normalize_tag('foo bar')
        'foo-bar'
        >>> normalize_tag('foo\\\\bar')
        'foo-bar'
    """
    return _TAG_SEPARATORS.sub('-', name, count=1)


def render_node(node: Any) -> str:
    """Render a child node: strings verbatim, renderables via render()."""
    if isinstance(node, str):
        return node
    render = getattr(node, 'render', None)
    if callable(render):
        return render()
    return str(node)


def _render_attribute(name: str, value: Any) -> str:
    if not value:
        return ''
    if value is True:
        return f' {name}'
    return f' {name}="{value}"'


def _owned_element(node: Any) -> Element | None:
    """Return the Element whose position a child occupies, if any."""
    if isinstance(node, Element):
        return node
    owned = getattr(node, 'element', None)
    return owned if isinstance(owned, Element) else None


def apply_attrs(target: Any, attrs: Any) -> Any:
    """Set every entry of a mapping as an attribute on target.

    Args:
        target: Anything with a set_attribute(name, value) method.
        attrs: Mapping of attribute names to values. Any other value
            (None included) is ignored.

    Returns:
        The target, for chaining.

    Example:
        >>> div = apply_attrs(Element(), {'id': 'example', 'class': 'demo'})
        >>> div.render()
        '<div id="example" class="demo"></div>'
    """
    if isinstance(attrs, Mapping):
        for name, value in attrs.items():
            target.set_attribute(name, value)
    elif attrs is not None:
        logger.debug("Ignoring non-mapping attributes %r", attrs)
    return target


class Element:
    """A markup node with attributes and ordered children.

    Attributes:
        tag: Normalized tag name. Fixed after construction.
        attributes: Attribute name -> value, in insertion order. True renders
            as a bare attribute, falsy values are not rendered.
        children: Child nodes in rendering order.
        self_closing: Render as ``<tag />`` when there are no children.
        parent: The Element this one is currently a child of, or None.
        pinned: When True and the element has a parent, insertions elsewhere
            leave it in place. Used for a document's head and body.

    Example:
        >>> Element('img', self_closing=True).set_attribute('src', 'a.png').render()
        '<img src="a.png" />'
    """

    __slots__ = ('tag', 'attributes', 'children', 'self_closing', 'parent', 'pinned')

    def __init__(self, tag: str = DEFAULT_TAG, self_closing: bool = False) -> None:
        """Initialize an Element.

        Args:
            tag: Tag name. The first run of whitespace, '/' or '\\' is
                replaced by a hyphen.
            self_closing: Whether an empty element renders as ``<tag />``.
        """
        self.tag = normalize_tag(tag)
        self.attributes: dict[str, Any] = {}
        self.children: list[Any] = []
        self.self_closing = self_closing
        self.parent: Element | None = None
        self.pinned = False

    def __repr__(self) -> str:
        return (
            f"Element({self.tag!r}, attributes={len(self.attributes)}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        return self.render()

    # ==================== Attributes ====================

    def set_attribute(self, name: str, value: Any = None) -> Element:
        """Set an attribute, or remove it when value is None.

        Args:
            name: Attribute name, used verbatim.
            value: Attribute value. True renders as a bare attribute.

        Returns:
            This element, for chaining.
        """
        if value is None:
            self.attributes.pop(name, None)
        else:
            self.attributes[name] = value
        return self

    def add_class(self, class_names: str | Iterable[str]) -> Element:
        """Append one or more CSS classes to the class attribute.

        Classes are not deduplicated: adding 'a' twice gives 'a a'.

        Args:
            class_names: A class string or an iterable of class strings.
        """
        if isinstance(class_names, str):
            joined = class_names
        else:
            joined = ' '.join(class_names)

        current = self.attributes.get('class')
        if current:
            self.attributes['class'] = f'{current} {joined}'
        else:
            self.attributes['class'] = joined
        return self

    def set_id(self, value: str | None = None) -> Element:
        """Set the id attribute, or remove it when value is None."""
        return self.set_attribute('id', value)

    # ==================== Children ====================

    def set_children(self, *nodes: Any) -> Element:
        """Replace all children with the given nodes.

        Pinned children stay in place, ahead of the new nodes.
        """
        kept = []
        for child in self.children:
            owned = _owned_element(child)
            if owned is not None and owned.pinned:
                kept.append(child)
            elif owned is not None and owned.parent is self:
                owned.parent = None
        self.children[:] = kept
        adopted = self._adopt(nodes)
        self.children.extend(adopted)
        return self

    def append_children(self, *nodes: Any) -> Element:
        """Add nodes after the existing children."""
        adopted = self._adopt(nodes)
        self.children.extend(adopted)
        return self

    def prepend_children(self, *nodes: Any) -> Element:
        """Add nodes before the existing children, keeping their order."""
        adopted = self._adopt(nodes)
        self.children[:0] = adopted
        return self

    def _adopt(self, nodes: Iterable[Any]) -> list[Any]:
        """Take ownership of nodes about to be inserted.

        Elements are detached from their current parent. When the same
        element appears more than once, only its last occurrence is kept.
        Pinned elements that already have a parent are left where they are
        and skipped.
        """
        adopted: list[Any] = []
        for node in nodes:
            owned = _owned_element(node)
            if owned is not None:
                if owned.pinned and owned.parent is not None:
                    logger.debug("Not moving pinned element %r", owned)
                    continue
                if owned.parent is not None:
                    owned.parent._release(owned)
                adopted = [n for n in adopted if _owned_element(n) is not owned]
                owned.parent = self
            adopted.append(node)
        return adopted

    def _release(self, element: Element) -> None:
        self.children[:] = [c for c in self.children if _owned_element(c) is not element]
        element.parent = None

    # ==================== Rendering ====================

    def render(self) -> str:
        """Render this element and its subtree to markup text."""
        attrs = ''.join(
            _render_attribute(name, value) for name, value in self.attributes.items()
        )
        if self.self_closing and not self.children:
            return f'<{self.tag}{attrs} />'

        content = ''.join(render_node(child) for child in self.children)
        return f'<{self.tag}{attrs}>{content}</{self.tag}>'


class ElementCollection:
    """An ordered group of sibling nodes rendered without a wrapper tag.

    Example:
        >>> ElementCollection([Element('br'), Element('hr')]).render()
        '<br></br><hr></hr>'
    """

    __slots__ = ('items',)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.items: list[Any] = list(items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"ElementCollection({len(self.items)})"

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        return ''.join(render_node(item) for item in self.items)
