# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementWrapper - base for cover classes that own an Element.

MetaElement, Document and DocumentHelper are built by composition: each
holds the object it specializes and forwards the public API it wants to
expose. Forwarded calls that return the wrapped object return the wrapper
instead, so a chain started on a Document stays on the Document.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, ClassVar

from .element import Element
from .exceptions import ElementAttributeError


class ElementWrapper:
    """Forward public attribute access to a wrapped object.

    Subclasses restrict what is forwarded with ``_exposed``: a frozenset of
    names, or None to forward every public name the wrapped object has.

    Example:
        >>> class Badge(ElementWrapper):
        ...     def __init__(self):
        ...         super().__init__(Element('span').add_class('badge'))
        >>> Badge().set_id('new').render()
        '<span class="badge" id="new"></span>'
    """

    _exposed: ClassVar[frozenset[str] | None] = None

    def __init__(self, target: Any) -> None:
        self._target = target

    def __getattr__(self, name: str) -> Any:
        """Forward an exposed public name to the wrapped object.

        Raises:
            ElementAttributeError: For private names and names this wrapper
                does not expose.
        """
        if name.startswith('_'):
            raise ElementAttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        exposed = type(self)._exposed
        if exposed is not None and name not in exposed:
            raise ElementAttributeError(
                f"'{type(self).__name__}' does not expose '{name}'"
            )

        value = getattr(self._target, name)
        if not callable(value):
            return value

        @wraps(value)
        def chained(*args: Any, **kwargs: Any) -> Any:
            result = value(*args, **kwargs)
            return self if result is self._target else result

        return chained

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    def __str__(self) -> str:
        return self.render()

    @property
    def element(self) -> Element:
        """The Element at the bottom of the wrapping chain."""
        target = self._target
        while isinstance(target, ElementWrapper):
            target = target._target
        return target

    def render(self) -> str:
        """Render the wrapped object."""
        return self._target.render()
