# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeStore package - Nested attribute container.

The package is organized into:
- core: Main AttributeStore class with get/set/fetch/attributes/reset
- extension: extend() mechanism installing bound helper methods

Example:
    >>> from genro_attrstore import AttributeStore
    >>> store = AttributeStore()
    >>> store.set('config.name', 'MyApp')
    'MyApp'
    >>> store.get('config.name')
    'MyApp'
"""

from .core import AttributeStore
from .extension import RESERVED_METHODS, ExtensionMixin

__all__ = ["AttributeStore", "ExtensionMixin", "RESERVED_METHODS"]
