# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-AttrStore - Nested attribute store with dotted-path access.

A lightweight, zero-dependency library holding per-request or per-resource
configuration for client libraries: dotted paths, awaitable values,
snapshot/reset and runtime extension with bound methods.
"""

__version__ = "0.1.0"

from .exceptions import (
    AttributeStoreError,
    InvalidPathError,
    ReservedMethodError,
)
from .paths import DEFAULT_SEPARATOR, MISSING
from .store import RESERVED_METHODS, AttributeStore, ExtensionMixin

__all__ = [
    # Core classes
    "AttributeStore",
    "ExtensionMixin",
    # Constants
    "DEFAULT_SEPARATOR",
    "MISSING",
    "RESERVED_METHODS",
    # Exceptions
    "AttributeStoreError",
    "InvalidPathError",
    "ReservedMethodError",
]
