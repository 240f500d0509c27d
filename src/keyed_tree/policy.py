# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Capability classifiers.

A classifier decides, for the next key along a path, whether the node that
will hold it should be a sequence or a map. The two policies differ only
here:

=========  ==========================================
Policy     SEQUENCE when the key is
=========  ==========================================
MAP        PUSH (push enabled)
AUTO       PUSH (push enabled), or any integer
=========  ==========================================

Every other key gives NodeKind.MAP.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .nodes import is_int_key
from .options import Options

Classifier = Callable[[Any, Options], 'NodeKind']


class NodeKind(Enum):
    """Kind of container to create for a key."""

    MAP = 'map'
    SEQUENCE = 'sequence'


def map_biased(key: Any, options: Options) -> NodeKind:
    """Only PUSH creates sequences; integer keys create maps."""
    if options.is_push(key):
        return NodeKind.SEQUENCE
    return NodeKind.MAP


def auto_biased(key: Any, options: Options) -> NodeKind:
    """PUSH and integer keys create sequences."""
    if options.is_push(key) or is_int_key(key):
        return NodeKind.SEQUENCE
    return NodeKind.MAP


class Policy(Enum):
    """Auto-vivification policy, fixed when a KeyedTree is built."""

    MAP = 'map'
    AUTO = 'auto'

    @property
    def classifier(self) -> Classifier:
        return _CLASSIFIERS[self]

    @classmethod
    def coerce(cls, policy: Policy | str) -> Policy:
        """Accept a Policy or its value ('map', 'auto').

        Raises:
            ValueError: If policy names no known policy.
        """
        if isinstance(policy, cls):
            return policy
        try:
            return cls(policy)
        except ValueError:
            choices = ', '.join(repr(p.value) for p in cls)
            raise ValueError(f"Unknown policy {policy!r}, expected one of {choices}") from None


_CLASSIFIERS: dict[Policy, Classifier] = {
    Policy.MAP: map_biased,
    Policy.AUTO: auto_biased,
}
