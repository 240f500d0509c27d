# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Auto-vivifying assignment.

``assign`` writes a value at the end of a key path, creating missing
intermediate nodes with the node factory. Existing nodes along the path are
reused as they are. Whether a new node is a map or a sequence is up to the
factory, which by default asks the active classifier about the *next* key.

Writes are not transactional: when a step fails, nodes created by earlier
steps stay in the tree.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..exceptions import IndexOutOfRangeError, UnsupportedOperationError
from ..factory import NodeContext, NodeFactory, default_node_factory
from ..nodes import is_int_key, is_map_node, is_node, is_sequence_node, node_kind_name
from ..options import NATIVE, Options, OptionsLike
from ..policy import Classifier, Policy

logger = logging.getLogger(__name__)


def assign(
    root: Any,
    path: Sequence[Any],
    value: Any,
    options: OptionsLike = None,
    policy: Policy | str = Policy.MAP,
    node_factory: NodeFactory | None = None,
) -> Any:
    """Store ``value`` at ``path`` below ``root``.

    Args:
        root: The root map or sequence node.
        path: Non-empty sequence of keys. PUSH appends.
        value: The value to store.
        options: Options (or mapping); only ``allowPush`` is used.
        policy: Classifier policy for new nodes.
        node_factory: Custom factory replacing the default one.

    Returns:
        ``value``, or NATIVE when the path is a single ordinary key on a map
        root: the caller is expected to perform ``root[key] = value`` itself.
        One-key writes on a sequence root are stored here, padding with None.

    Raises:
        ValueError: If path is empty.
        UnsupportedOperationError: PUSH on a map, descending into a leaf,
            or a non-integer key stored into a sequence.
        IndexOutOfRangeError: Negative index before the start of a sequence.
    """
    if not path:
        raise ValueError("Empty path")
    opts = Options.coerce(options)
    classify = Policy.coerce(policy).classifier
    factory = node_factory if node_factory is not None else default_node_factory

    if len(path) == 1 and not opts.is_push(path[0]) and not is_sequence_node(root):
        return NATIVE

    node, key = root, path[0]
    for depth, next_key in enumerate(path[1:], start=1):
        node = _descend(node, key, next_key, path[:depth], factory, classify, opts)
        key = next_key

    _store(node, key, value, path, opts)
    return value


def _descend(
    node: Any,
    key: Any,
    next_key: Any,
    path: Sequence[Any],
    factory: NodeFactory,
    classify: Classifier,
    options: Options,
) -> Any:
    """Return the child of node at key, creating it if needed."""
    if options.is_push(key):
        _require_sequence(node, key, path)
        child = factory(next_key, NodeContext(node, key, classify), options)
        node.append(child)
        logger.debug("Auto-vivified %s appended at %r", node_kind_name(child), list(path))
        return child

    child = _existing(node, key)
    if child is None:
        child = factory(next_key, NodeContext(node, key, classify), options)
        _store(node, key, child, path, options)
        logger.debug("Auto-vivified %s at %r", node_kind_name(child), list(path))
    elif not is_node(child):
        raise UnsupportedOperationError(
            f"Value at {list(path)!r} is a leaf ({type(child).__name__}), "
            f"cannot descend to {next_key!r}",
            key=key,
            path=path,
        )
    return child


def _existing(node: Any, key: Any) -> Any:
    """Current child at key, or None when absent."""
    if is_sequence_node(node):
        if is_int_key(key) and -len(node) <= key < len(node):
            return node[key]
        return None
    if is_map_node(node):
        return node.get(key)
    return None


def _store(node: Any, key: Any, value: Any, path: Sequence[Any], options: Options) -> None:
    """Assign or append value on node, growing sequences with None gaps."""
    if options.is_push(key):
        _require_sequence(node, key, path)
        node.append(value)
        return

    if is_sequence_node(node):
        if not is_int_key(key):
            raise UnsupportedOperationError(
                f"Sequence index must be an integer, got {key!r}", key=key, path=path
            )
        size = len(node)
        if key < -size:
            raise IndexOutOfRangeError(
                f"Index {key} out of range (size {size})", key=key, path=path
            )
        if key >= size:
            node.extend([None] * (key - size + 1))
        node[key] = value
    elif is_map_node(node):
        node[key] = value
    else:
        raise UnsupportedOperationError(
            f"Cannot assign {key!r} on a {type(node).__name__} leaf", key=key, path=path
        )


def _require_sequence(node: Any, key: Any, path: Sequence[Any]) -> None:
    if not is_sequence_node(node):
        raise UnsupportedOperationError(
            f"Cannot append to a {node_kind_name(node)} node", key=key, path=path
        )
