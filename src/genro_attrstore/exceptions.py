# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeStore exceptions."""

from __future__ import annotations


class AttributeStoreError(Exception):
    """Base exception for AttributeStore errors."""

    pass


class ReservedMethodError(AttributeStoreError, AttributeError):
    """Raised when extend() would shadow a core or private method."""

    pass


class InvalidPathError(AttributeStoreError, ValueError):
    """Raised when a path is empty or contains an empty segment."""

    pass
