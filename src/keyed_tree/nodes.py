# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node capabilities.

A node is one level of the tree:

- map node: any ``MutableMapping`` (get, set, has)
- sequence node: any ``MutableSequence`` except text and bytes
  (append, index get, index set, length)

Reads also walk read-only containers (``Mapping``, ``Sequence`` such as
tuples); writes need the mutable ones above.

Everything else stored in a tree is a leaf value.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


def is_map_node(node: Any) -> bool:
    """True if node is map-like."""
    return isinstance(node, MutableMapping)


def is_sequence_node(node: Any) -> bool:
    """True if node is sequence-like (append-capable)."""
    return isinstance(node, MutableSequence) and not isinstance(node, _TEXT_TYPES)


def is_readable_map(node: Any) -> bool:
    """True if node can be read like a map."""
    return isinstance(node, Mapping)


def is_readable_sequence(node: Any) -> bool:
    """True if node can be indexed like a sequence."""
    return isinstance(node, Sequence) and not isinstance(node, _TEXT_TYPES)


def is_node(node: Any) -> bool:
    """True if node is a map or sequence node."""
    return is_map_node(node) or is_sequence_node(node)


def is_int_key(key: Any) -> bool:
    """True for integer keys. Booleans are not integers here."""
    return isinstance(key, int) and not isinstance(key, bool)


def node_kind_name(node: Any) -> str:
    if is_map_node(node):
        return 'map'
    if is_sequence_node(node):
        return 'sequence'
    return type(node).__name__
