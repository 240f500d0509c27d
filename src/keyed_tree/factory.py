# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node construction for auto-vivification.

A node factory is any callable with the signature::

    factory(next_key, context, options) -> node

It is asked for a new node every time the assignment engine has to create an
intermediate level. ``next_key`` is the key the new node must accept,
``context`` describes where the node is going to be placed (see
:class:`NodeContext`) and ``options`` is the call's :class:`Options`.

Example:
    A factory building ordered maps and ``None``-padded lists::

        >>> from collections import OrderedDict
        >>> tree = KeyedTree(node_factory=DefaultNodeFactory(map_type=OrderedDict))
        >>> tree.set('a', 'b', value=1)
        >>> type(tree['a'])
        <class 'collections.OrderedDict'>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import UnsupportedOperationError
from .options import Options
from .policy import Classifier, NodeKind

NodeFactory = Callable[[Any, 'NodeContext', Options], Any]


@dataclass(frozen=True)
class NodeContext:
    """Where a new node is being created.

    Attributes:
        node: The parent node that will hold the new node.
        key: The key the new node is stored under in ``node``
            (PUSH when it is appended).
        classify: The active classifier, ``classify(key, options) -> NodeKind``.
    """

    node: Any
    key: Any
    classify: Classifier


class DefaultNodeFactory:
    """Build an empty sequence or map as the classifier decides.

    Args:
        map_type: Zero-argument callable returning a new map node.
        sequence_type: Zero-argument callable returning a new sequence node.
    """

    __slots__ = ('map_type', 'sequence_type')

    def __init__(
        self,
        map_type: Callable[[], Any] = dict,
        sequence_type: Callable[[], Any] = list,
    ) -> None:
        self.map_type = map_type
        self.sequence_type = sequence_type

    def __repr__(self) -> str:
        return (
            f"DefaultNodeFactory(map_type={_name(self.map_type)}, "
            f"sequence_type={_name(self.sequence_type)})"
        )

    def __call__(self, next_key: Any, context: NodeContext, options: Options) -> Any:
        kind = context.classify(next_key, options)
        if kind is NodeKind.SEQUENCE:
            return self.sequence_type()
        if kind is NodeKind.MAP:
            return self.map_type()
        raise UnsupportedOperationError(
            f"Cannot build a node for key {next_key!r}: unknown kind {kind!r}",
            key=next_key,
        )


def _name(factory: Callable[[], Any]) -> str:
    return getattr(factory, '__name__', repr(factory))


default_node_factory = DefaultNodeFactory()
