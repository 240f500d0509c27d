# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read-only path traversal.

``fetch`` walks a key path through nested maps and sequences one
``node_fetch`` at a time and stops at the first miss. What happens on a miss
depends on the options:

1. ``raise`` set to an error spec: that error is raised instead.
2. ``raise`` is True, or no ``else`` given: the lookup error is raised
   (:class:`KeyNotFoundError` or :class:`IndexOutOfRangeError`).
3. Otherwise the ``else`` value is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..exceptions import IndexOutOfRangeError, KeyNotFoundError
from ..nodes import is_int_key, is_readable_map, is_readable_sequence
from ..options import Found, LookupResult, NotFound, Options, OptionsLike

logger = logging.getLogger(__name__)


def node_fetch(node: Any, key: Any, path: Sequence[Any] = ()) -> LookupResult:
    """Look up a single key on a single node.

    Args:
        node: Map node, sequence node (read-only ones included) or leaf.
        key: The key to look up.
        path: Keys consumed so far, including ``key`` (for error reporting).

    Returns:
        Found(value) or NotFound(error). Never raises for a missing key.
    """
    if is_readable_map(node):
        if key in node:
            return Found(node[key])
        return NotFound(KeyNotFoundError(f"Key {key!r} not found", key=key, path=path))

    if is_readable_sequence(node):
        if not is_int_key(key):
            return NotFound(KeyNotFoundError(
                f"Sequence index must be an integer, got {key!r}", key=key, path=path
            ))
        size = len(node)
        if -size <= key < size:
            return Found(node[key])
        return NotFound(IndexOutOfRangeError(
            f"Index {key} out of range (size {size})", key=key, path=path
        ))

    return NotFound(KeyNotFoundError(
        f"{type(node).__name__} value is a leaf, cannot access {key!r}",
        key=key,
        path=path,
    ))


def fetch(root: Any, path: Sequence[Any], options: OptionsLike = None) -> Any:
    """Return the value at ``path`` below ``root``.

    Args:
        root: The root node.
        path: Non-empty sequence of keys.
        options: Options (or mapping) controlling the miss policy.

    Returns:
        The stored value, or ``options.default`` on a miss.

    Raises:
        ValueError: If path is empty.
        KeyNotFoundError: Map key missing (or path through a leaf).
        IndexOutOfRangeError: Sequence index out of range.
        Exception: Whatever the ``raise`` error spec builds.

    Example:
        >>> fetch({'a': {'b': 1}}, ['a', 'b'])
        1
        >>> fetch({'a': 'a'}, ['b'], {'else': False})
        False
    """
    if not path:
        raise ValueError("Empty path")
    opts = Options.coerce(options)

    node = root
    for depth, key in enumerate(path):
        result = node_fetch(node, key, path[:depth + 1])
        if isinstance(result, NotFound):
            return _on_miss(result.error, opts)
        node = result.value
    return node


def _on_miss(error: Exception, options: Options) -> Any:
    spec = options.raise_
    if spec and spec is not True:
        raise build_error(spec) from error
    if spec is True or not options.has_default:
        raise error
    logger.debug("Path miss (%s), returning default", error)
    return options.default


def build_error(spec: Any) -> BaseException:
    """Build the exception described by a ``raise`` error spec.

    Accepted forms: an exception instance, an exception class, or a
    sequence ``(exception_class, *args)``.

    Raises:
        TypeError: If spec is none of the above.
    """
    if isinstance(spec, BaseException):
        return spec
    if isinstance(spec, type) and issubclass(spec, BaseException):
        return spec()
    if isinstance(spec, (list, tuple)) and spec:
        cls, *args = spec
        if isinstance(cls, type) and issubclass(cls, BaseException):
            return cls(*args)
    raise TypeError(f"Invalid raise option: {spec!r}")
