# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Doctype declarations understood by Document.set_doctype()."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

HTML5 = 5

_PREFIX = '<!DOCTYPE HTML'

DOCTYPES: dict[Any, str] = {
    HTML5: f'{_PREFIX}>',
    '5': f'{_PREFIX}>',
    'strict': (
        f'{_PREFIX} PUBLIC "-//W3C//DTD HTML 4.01//EN" '
        '"http://www.w3.org/TR/html4/strict.dtd">'
    ),
    'transitional': (
        f'{_PREFIX} PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
        '"http://www.w3.org/TR/html4/loose.dtd">'
    ),
    'frameset': (
        f'{_PREFIX} PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
        '"http://www.w3.org/TR/html4/frameset.dtd">'
    ),
}


def resolve_doctype(version: Any = HTML5) -> str:
    """Return the doctype declaration for a version key.

    Args:
        version: 5, '5', 'strict', 'transitional' or 'frameset'.
            Anything else falls back to the HTML5 declaration.

    Examples:
        >>> resolve_doctype()
        '<!DOCTYPE HTML>'
        >>> resolve_doctype('unknown')
        '<!DOCTYPE HTML>'
    """
    try:
        return DOCTYPES[version]
    except (KeyError, TypeError):
        logger.debug("Unknown doctype %r, using HTML5", version)
        return DOCTYPES[HTML5]
