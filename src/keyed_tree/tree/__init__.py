# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""KeyedTree package - key-path access over nested containers.

This package provides the KeyedTree class, a wrapper around a root map or
sequence adding multi-key reads with defaults and auto-vivifying writes.

Example:
    >>> from keyed_tree import KeyedTree
    >>> tree = KeyedTree()
    >>> tree['config', 'name'] = 'MyApp'
    >>> tree['config', 'name']
    'MyApp'
"""

from .core import KeyedTree

__all__ = ["KeyedTree"]
