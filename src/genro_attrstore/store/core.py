# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeStore - A mutable container around a nested attribute tree.

This module provides the AttributeStore class. It keeps two trees: the live
attributes, mutated by set/fetch, and an original snapshot used by reset.

Key Features:
    - **Path navigation**: Dotted paths ('a.b.c') with autocreate on write
    - **Deferred values**: Awaitables are resolved before being stored
    - **Memoized fill**: fetch() computes and stores only when missing
    - **Snapshots**: reset() restores, and optionally overrides, the original
    - **Extensions**: extend() installs bound helper methods

Example:
    Basic usage::

        store = AttributeStore({'company': {'floors': {'first': 'A'}}})
        store.get('company.floors.first')  # 'A'
        store.set('company.floors.second', 'B')
        store.fetch('timeout', lambda: 30)  # 30, stored
        store.reset()  # back to the original attributes

    Deferred values::

        async def load_token():
            ...

        token = await store.set('auth.token', load_token())
"""

from __future__ import annotations

import asyncio
import copy
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Awaitable

from .. import paths
from ..paths import DEFAULT_SEPARATOR, MISSING, PathLike
from .extension import ExtensionMixin

logger = logging.getLogger(__name__)


class AttributeStore(ExtensionMixin):
    """A nested attribute tree with snapshot/restore and extensions.

    AttributeStore provides:
    - get(path, default): Read a value
    - set(path, value): Write a value, resolving awaitables first
    - fetch(path, value): Read, or compute and store when missing
    - attributes(*paths): Deep copy of the whole tree or of some paths
    - reset(overrides): Restore the original snapshot
    - extend(methods): Add bound helper methods

    Example:
        >>> store = AttributeStore({'name': 'Someone'})
        >>> store.fetch('name', 'other')
        'Someone'
        >>> store.set('a.b', 1)
        1
        >>> store.attributes('a.b', 'missing')
        {'a': {'b': 1}, 'missing': None}
    """

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        *,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """Initialize an AttributeStore.

        Args:
            attributes: Optional nested mapping. It is deep-copied, so the
                caller's object is never mutated.
            separator: Segment separator for string paths.

        Raises:
            TypeError: If attributes is not a mapping.
            ValueError: If separator is empty.
        """
        if attributes is None:
            attributes = {}
        elif not isinstance(attributes, Mapping):
            raise TypeError(
                f"attributes must be a mapping, not {type(attributes).__name__}"
            )
        if not separator:
            raise ValueError("separator must be a non-empty string")

        self._separator = separator
        self._original: dict[str, Any] = copy.deepcopy(dict(attributes))
        self._current: dict[str, Any] = copy.deepcopy(self._original)
        self._extensions = {}

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"AttributeStore({list(self._current.keys())})"

    def __contains__(self, path: PathLike) -> bool:
        return self.has(path)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeStore):
            return self._current == other._current
        if isinstance(other, Mapping):
            return self._current == other
        return NotImplemented

    __hash__ = None  # mutable

    @property
    def separator(self) -> str:
        return self._separator

    # ==================== Core API ====================

    def get(self, path: PathLike, default: Any = None) -> Any:
        """Get the value at path.

        Args:
            path: Top-level key or dotted chain.
            default: Returned when the path does not resolve.

        Returns:
            The stored value, or default.
        """
        value = paths.read(self._current, path, self._separator)
        if value is MISSING:
            return default
        return value

    def has(self, path: PathLike) -> bool:
        """True if path resolves in the live attributes."""
        return paths.read(self._current, path, self._separator) is not MISSING

    def set(self, path: PathLike, value: Any) -> Any:
        """Set value at path, creating intermediate nodes as needed.

        If value is awaitable the write is deferred until it resolves and
        a pending handle is returned instead:

        - inside a running event loop, an ``asyncio.Task`` already scheduled;
        - otherwise, a coroutine to be awaited (or run) by the caller.

        Either way the handle yields the resolved value. If the awaitable
        raises, the handle raises the same exception and nothing is written.

        Returns:
            The value, or the pending handle for awaitables.

        Raises:
            InvalidPathError: If the path is malformed (also for awaitables).
        """
        if inspect.isawaitable(value):
            return self._set_deferred(path, value)
        return self._write(path, value)

    def fetch(self, path: PathLike, value: Any) -> Any:
        """Return the value at path, storing value first if missing.

        A present value is returned untouched and nothing is written.
        Otherwise, if value is callable it is called with no arguments,
        and the result is stored through set() (awaitables included).

        Example:
            >>> store.fetch('retries', 3)
            3
            >>> store.fetch('retries', 5)
            3
            >>> await store.fetch('token', load_token)  # async def load_token()
        """
        current = paths.read(self._current, path, self._separator)
        if current is not MISSING:
            return current
        if callable(value):
            value = value()
        return self.set(path, value)

    def unset(self, path: PathLike) -> Any:
        """Remove path from the live attributes.

        Returns:
            The removed value, or None if the path did not resolve.
        """
        removed = paths.delete(self._current, path, self._separator)
        return None if removed is MISSING else removed

    def attributes(self, *keys: PathLike) -> dict[str, Any]:
        """Return a deep copy of the live attributes.

        Args:
            *keys: Optional paths. When given, only these paths are
                returned, each rebuilt from the root with its intermediate
                structure. Unresolved paths get a None leaf, unless that
                would replace a value already placed by another path.

        Example:
            >>> store.attributes('new.value', 'company.floors')
            {'new': {'value': None}, 'company': {'floors': {'first': 'A'}}}
        """
        if not keys:
            return copy.deepcopy(self._current)

        result: dict[str, Any] = {}
        for key in keys:
            value = paths.read(self._current, key, self._separator)
            if value is MISSING:
                if _runs_into_leaf(result, paths.split(key, self._separator)):
                    continue
                value = None
            paths.write(result, key, copy.deepcopy(value), self._separator)
        return result

    def reset(self, overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Restore the live attributes from the original snapshot.

        Args:
            overrides: Optional mapping merged into the snapshot itself
                (top-level keys replaced, no deep merge) before restoring.
                The merge is persistent: later reset() calls restore the
                overridden snapshot.

        Returns:
            A deep copy of the restored attributes.

        Raises:
            TypeError: If overrides is not a mapping.
        """
        if overrides is not None:
            if not isinstance(overrides, Mapping):
                raise TypeError(
                    f"overrides must be a mapping, not {type(overrides).__name__}"
                )
            self._original.update(copy.deepcopy(dict(overrides)))

        self._current = copy.deepcopy(self._original)
        return self.attributes()

    # ==================== Writes ====================

    def _write(self, path: PathLike, value: Any) -> Any:
        """Synchronous write shared by immediate and deferred set()."""
        return paths.write(self._current, path, value, self._separator)

    def _set_deferred(self, path: PathLike, awaitable: Awaitable[Any]) -> Any:
        # Fail fast on malformed paths, before anything is scheduled
        paths.split(path, self._separator)
        pending = self._resolve_and_write(path, awaitable)
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("Deferred write of %r waits for the caller", path)
            return pending
        logger.debug("Scheduled deferred write of %r", path)
        return asyncio.ensure_future(pending)

    async def _resolve_and_write(
        self, path: PathLike, awaitable: Awaitable[Any]
    ) -> Any:
        value = await awaitable
        self._write(path, value)
        logger.debug("Deferred write of %r completed", path)
        return value


def _runs_into_leaf(tree: Mapping, parts: tuple[str, ...]) -> bool:
    """True if a proper prefix of parts already holds a non-mapping in tree."""
    node: Any = tree
    for part in parts[:-1]:
        if part not in node:
            return False
        node = node[part]
        if not isinstance(node, Mapping):
            return True
    return False
