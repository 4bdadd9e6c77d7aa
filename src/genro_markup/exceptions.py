# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup builder exceptions."""

from __future__ import annotations


class MarkupError(Exception):
    """Base exception for markup builder errors."""

    pass


class ElementAttributeError(MarkupError, AttributeError):
    """Raised when a dynamic lookup asks for a name that is not available.

    Subclasses AttributeError so hasattr() and getattr() with a default
    behave as usual.
    """

    pass
