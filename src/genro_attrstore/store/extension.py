# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Runtime extension of AttributeStore instances with bound methods."""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any, Callable

from ..exceptions import ReservedMethodError

logger = logging.getLogger(__name__)

RESERVED_METHODS = frozenset({
    'get', 'set', 'fetch', 'attributes', 'reset', 'extend',
    'has', 'unset', 'extensions',
})


class ExtensionMixin:
    """Mixin adding extend() to a store.

    Extensions are plain functions whose first argument receives the
    store, exactly like a method's ``self``. They are installed on the
    instance only, so two stores never share extensions.

    Example:
        >>> store = AttributeStore({'name': 'Someone'})
        >>> store.extend(greetings=lambda self, prefix='Hello': f"{prefix} {self.get('name')}")
        >>> store.greetings('Hey')
        'Hey Someone'
    """

    _extensions: dict[str, Callable[..., Any]]

    def extend(
        self,
        methods: Mapping[str, Callable[..., Any]] | None = None,
        **kwargs: Callable[..., Any],
    ) -> Any:
        """Install named callables as methods of this instance.

        The whole call is validated before anything is installed: one bad
        entry rejects every entry of the call.

        Args:
            methods: Mapping of method name to callable.
            **kwargs: Additional methods as keyword arguments.

        Returns:
            This store, for chaining.

        Raises:
            ReservedMethodError: If a name is a core method, starts with '_',
                or shadows any other class attribute.
            TypeError: If a name is not a string or a value is not callable.
        """
        pending: dict[str, Callable[..., Any]] = {}
        if methods:
            pending.update(methods)
        pending.update(kwargs)

        for name, func in pending.items():
            if not isinstance(name, str):
                raise TypeError(
                    f"Extension name must be a string, not {type(name).__name__}"
                )
            if (
                name in RESERVED_METHODS
                or name.startswith('_')
                or any(name in klass.__dict__ for klass in type(self).__mro__)
            ):
                raise ReservedMethodError(
                    f"Cannot extend {type(self).__name__} with reserved method '{name}'"
                )
            if not callable(func):
                raise TypeError(
                    f"Extension '{name}' must be callable, not {type(func).__name__}"
                )

        for name, func in pending.items():
            self._extensions[name] = func
            setattr(self, name, types.MethodType(func, self))
            logger.debug("Registered extension %r on %r", name, self)

        return self

    def extensions(self) -> dict[str, Callable[..., Any]]:
        """Return a copy of the registered extensions (name -> raw callable)."""
        return dict(self._extensions)
