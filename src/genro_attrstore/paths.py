# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path utilities for nested attribute trees.

Pure functions operating on plain nested dicts. A path is either a dotted
string ('company.floors.first') or a sequence of segments
(('company', 'floors', 'first')).

Example:
    >>> tree = {}
    >>> write(tree, 'a.b.c', 1)
    1
    >>> tree
    {'a': {'b': {'c': 1}}}
    >>> read(tree, 'a.b.c')
    1
    >>> read(tree, 'a.x.c')
    MISSING
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Sequence, Union

from .exceptions import InvalidPathError

DEFAULT_SEPARATOR = '.'

PathLike = Union[str, Sequence[str]]


class _Missing:
    """Sentinel for unresolved paths."""

    __slots__ = ()
    _instance = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return 'MISSING'


MISSING = _Missing()


def split(path: PathLike, separator: str = DEFAULT_SEPARATOR) -> tuple[str, ...]:
    """Split a path into its segments.

    Args:
        path: Dotted string or sequence of segments. Sequences are
            taken verbatim, no further splitting.
        separator: Segment separator for string paths.

    Returns:
        Tuple of non-empty segments.

    Raises:
        InvalidPathError: If the path or any segment is empty.
    """
    if isinstance(path, str):
        parts = tuple(path.split(separator))
    else:
        parts = tuple(path)
    if not parts:
        raise InvalidPathError("Empty path")
    for part in parts:
        if not isinstance(part, str) or not part:
            raise InvalidPathError(f"Invalid segment {part!r} in path {path!r}")
    return parts


def read(tree: Mapping, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> Any:
    """Return the value at path, or MISSING if any step does not resolve.

    A step fails when the current node is not a mapping or lacks the
    next segment, so a chain that runs into a scalar halfway is MISSING too.
    """
    current: Any = tree
    for part in split(path, separator):
        if not isinstance(current, Mapping) or part not in current:
            return MISSING
        current = current[part]
    return current


def write(
    tree: MutableMapping, path: PathLike, value: Any,
    separator: str = DEFAULT_SEPARATOR,
) -> Any:
    """Set value at path, creating intermediate dicts as needed.

    An intermediate node that is not a mapping is replaced by an empty
    dict: the final segment always wins.

    Returns:
        The value, unchanged.
    """
    parts = split(path, separator)
    current = tree
    for part in parts[:-1]:
        child = current.get(part, MISSING)
        if not isinstance(child, MutableMapping):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value
    return value


def delete(
    tree: MutableMapping, path: PathLike, separator: str = DEFAULT_SEPARATOR,
) -> Any:
    """Remove the terminal key at path.

    Returns:
        The removed value, or MISSING if the path did not resolve
        (the tree is left untouched).
    """
    parts = split(path, separator)
    parent = read(tree, parts[:-1], separator) if len(parts) > 1 else tree
    if not isinstance(parent, MutableMapping) or parts[-1] not in parent:
        return MISSING
    return parent.pop(parts[-1])
