# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Keyed-Tree - Extended key paths over nested maps and sequences.

A lightweight, zero-dependency library for reading and writing nested
dict/list trees with a single key path, auto-vivifying missing levels on
write and applying else/raise policies on read.
"""

__version__ = "0.1.0"

from .engine import assign, fetch, node_fetch
from .exceptions import (
    IndexOutOfRangeError,
    KeyedTreeError,
    KeyNotFoundError,
    UnsupportedOperationError,
)
from .factory import DefaultNodeFactory, NodeContext, default_node_factory
from .options import MISSING, NATIVE, PUSH, Found, NotFound, Options
from .policy import NodeKind, Policy, auto_biased, map_biased
from .tree import KeyedTree

__all__ = [
    # Core classes
    "KeyedTree",
    "Options",
    "PUSH",
    "MISSING",
    # Engine
    "fetch",
    "assign",
    "node_fetch",
    "NATIVE",
    "Found",
    "NotFound",
    # Policies
    "Policy",
    "NodeKind",
    "map_biased",
    "auto_biased",
    # Node construction
    "DefaultNodeFactory",
    "NodeContext",
    "default_node_factory",
    # Exceptions
    "KeyedTreeError",
    "KeyNotFoundError",
    "IndexOutOfRangeError",
    "UnsupportedOperationError",
]
