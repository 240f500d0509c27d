# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""KeyedTree - key-path access over nested maps and sequences.

This module provides the KeyedTree class, a thin wrapper around a root map
or sequence that adds multi-key reads and auto-vivifying writes. The wrapped
containers stay plain Python objects: the tree never copies them and never
changes their type.

Key Features:
    - **Path reads**: ``tree['a', 'b', 0]`` walks nested containers
    - **Defaults**: missing paths read as None, or an ``else`` value
    - **Auto-vivification**: ``tree['a', 'b'] = 1`` creates ``{'a': {'b': 1}}``
    - **Append**: the PUSH key appends to sequences
    - **Policies**: MAP creates maps for integer keys, AUTO creates lists

Dispatch Rules (reads):
    - One key: plain ``root[key]`` (slices included)
    - Two integers on a sequence root: ``(start, length)`` slice
    - Anything else, or any call passing ``options``: path traversal

Example:
    Basic usage::

        tree = KeyedTree.auto()
        tree['users', 0, 'name'] = 'Alice'
        tree.root                     # {'users': [{'name': 'Alice'}]}
        tree['users', 0, 'name']      # 'Alice'
        tree['users', 1, 'name']      # None

    Appending::

        tree = KeyedTree([])
        tree[PUSH] = 'a'
        tree[PUSH, 'k'] = 'v'
        tree.root                     # ['a', {'k': 'v'}]
"""

from __future__ import annotations

from typing import Any

from ..engine import assign, fetch
from ..exceptions import IndexOutOfRangeError, KeyNotFoundError
from ..factory import NodeFactory
from ..nodes import is_int_key, is_node, is_sequence_node
from ..options import NATIVE, Options, OptionsLike
from ..policy import Policy


class KeyedTree:
    """A root map or sequence with extended key-path access.

    KeyedTree provides:
    - get(*keys) / tree[k1, k2]: Read with the dispatch rules above
    - fetch(*keys): Strict path read, raising on a miss by default
    - set(*keys, value=...) / tree[k1, k2] = v: Auto-vivifying write
    - subtree(*keys): Wrap a descendant with the same policy

    Attributes:
        root: The wrapped container.
        policy: Policy used to classify keys when creating nodes.
        node_factory: Custom node factory, or None for the default one.

    Example:
        >>> tree = KeyedTree()
        >>> tree.set(1, 2, value='12')
        '12'
        >>> tree.root
        {1: {2: '12'}}
    """

    __slots__ = ('_root', '_policy', '_node_factory')

    def __init__(
        self,
        root: Any = None,
        policy: Policy | str = Policy.MAP,
        node_factory: NodeFactory | None = None,
    ) -> None:
        """Initialize a KeyedTree.

        Args:
            root: The root container, a map or a sequence. None creates an
                empty dict. The container is wrapped, not copied.
            policy: Policy.MAP ('map') or Policy.AUTO ('auto').
            node_factory: Optional ``factory(next_key, context, options)``
                used instead of the default factory when new nodes are
                needed. It is solely responsible for the nodes it returns.

        Raises:
            TypeError: If root is not a map or sequence.
            ValueError: If policy is unknown.

        Example:
            >>> KeyedTree({'a': 1})
            >>> KeyedTree([], policy='auto')
            >>> KeyedTree(node_factory=DefaultNodeFactory(map_type=OrderedDict))
        """
        if root is None:
            root = {}
        if not is_node(root):
            raise TypeError(
                f"root must be a map or sequence, not {type(root).__name__}"
            )
        self._root = root
        self._policy = Policy.coerce(policy)
        self._node_factory = node_factory

    @classmethod
    def map(cls, root: Any = None, node_factory: NodeFactory | None = None) -> KeyedTree:
        """KeyedTree with the MAP policy: integer keys create maps."""
        return cls(root, Policy.MAP, node_factory)

    @classmethod
    def auto(cls, root: Any = None, node_factory: NodeFactory | None = None) -> KeyedTree:
        """KeyedTree with the AUTO policy: integer keys create sequences."""
        return cls(root, Policy.AUTO, node_factory)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"KeyedTree({self._root!r}, policy={self._policy.value!r})"

    def __len__(self) -> int:
        return len(self._root)

    def __contains__(self, key: Any) -> bool:
        """Check a single key (not a path) on the root.

        For sequences, an integer key is contained when it is a valid index.
        """
        if is_sequence_node(self._root):
            return is_int_key(key) and -len(self._root) <= key < len(self._root)
        return key in self._root

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KeyedTree):
            return self._root == other._root and self._policy is other._policy
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: Any) -> Any:
        """Read by key or key path.

        ``tree[k]`` is ``get(k)``; ``tree[k1, k2, ...]`` is ``get(k1, k2, ...)``.
        A single key is plain indexing and raises on a miss, while a path
        reads None: ``tree['z']`` raises KeyNotFoundError but
        ``tree['z', 'y']`` is None.

        Example:
            >>> tree['a']            # root['a']
            >>> tree['a', 'b']       # path, None if missing
            >>> tree[1, 2]           # slice on a sequence root
        """
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        """Write by key or key path, creating nodes as needed.

        Example:
            >>> tree['a', 'b'] = 1
            >>> tree[PUSH] = 'x'     # append on a sequence root
            >>> tree[3] = 'y'        # on a sequence root, pads with None
        """
        if isinstance(key, tuple):
            self.set(*key, value=value)
        else:
            self.set(key, value=value)

    # ==================== Properties ====================

    @property
    def root(self) -> Any:
        """The wrapped root container."""
        return self._root

    @property
    def policy(self) -> Policy:
        return self._policy

    @property
    def node_factory(self) -> NodeFactory | None:
        return self._node_factory

    # ==================== Core API ====================

    def fetch(self, *keys: Any, options: OptionsLike = None) -> Any:
        """Strict path read.

        Unlike get(), there is no implicit default: a miss raises unless
        ``options`` gives ``else``.

        Args:
            *keys: The key path (at least one key).
            options: Options or mapping with ``else``/``raise``.

        Raises:
            KeyNotFoundError: Map key missing.
            IndexOutOfRangeError: Sequence index out of range.
        """
        return fetch(self._root, keys, options)

    def get(self, *keys: Any, options: OptionsLike = None) -> Any:
        """Read a single key, a native slice, or a key path.

        Args:
            *keys: One key, ``(start, length)`` on a sequence root, or a path.
            options: Options or mapping. Passing any options (even ``{}``)
                forces path traversal; without it a missing path gives None.

        Raises:
            KeyNotFoundError: A single missing map key without options
                (native indexing has no default).
            IndexOutOfRangeError: A single out-of-range index without options.

        Returns:
            The value found, a slice, the ``else`` value, or None.

        Example:
            >>> tree = KeyedTree(['0', ['1.0'], ['2.0', ['2.1.0', '2.1.1']]])
            >>> tree.get(1, 1)               # slice
            [['1.0']]
            >>> tree.get(1, 0, options={})   # path
            '1.0'
            >>> tree.get(2, 1, 1)
            '2.1.1'
        """
        if not keys:
            raise ValueError("Empty path")
        if options is None:
            if len(keys) == 1:
                return self._native_get(keys[0])
            if (
                len(keys) == 2
                and is_sequence_node(self._root)
                and is_int_key(keys[0])
                and is_int_key(keys[1])
            ):
                return self._native_slice(keys[0], keys[1])
            return fetch(self._root, keys, Options(default=None))
        return fetch(self._root, keys, options)

    def set(self, *keys: Any, value: Any, options: OptionsLike = None) -> Any:
        """Store value at a key path, creating missing nodes.

        Args:
            *keys: The key path (at least one key). PUSH appends.
            value: The value to store (keyword only).
            options: Options or mapping; ``allowPush=False`` makes PUSH an
                ordinary key.

        Returns:
            The stored value.

        Raises:
            UnsupportedOperationError: PUSH on a map, descending into a leaf,
                or a non-integer key on a sequence.
            IndexOutOfRangeError: Negative index before the start of a sequence.

        Example:
            >>> KeyedTree.auto().set('a', 0, value='x')
            'x'
        """
        result = assign(
            self._root, keys, value,
            options=options,
            policy=self._policy,
            node_factory=self._node_factory,
        )
        if result is NATIVE:
            self._root[keys[0]] = value
        return value

    def subtree(self, *keys: Any) -> KeyedTree:
        """Wrap the node at a key path, keeping policy and node factory.

        Raises:
            KeyNotFoundError: If the path does not exist or ends on a leaf.
            IndexOutOfRangeError: If a sequence index is out of range.
        """
        node = fetch(self._root, keys)
        if not is_node(node):
            raise KeyNotFoundError(
                f"Value at {list(keys)!r} is a leaf, not a node",
                key=keys[-1],
                path=keys,
            )
        return type(self)(node, self._policy, self._node_factory)

    # ==================== Native Access ====================

    def _native_get(self, key: Any) -> Any:
        try:
            return self._root[key]
        except KeyError as e:
            raise KeyNotFoundError(f"Key {key!r} not found", key=key, path=(key,)) from e
        except IndexError as e:
            raise IndexOutOfRangeError(
                f"Index {key} out of range (size {len(self._root)})", key=key, path=(key,)
            ) from e

    def _native_slice(self, start: int, length: int) -> Any:
        """``(start, length)`` slice: None when start is past the end."""
        size = len(self._root)
        if start < 0:
            start += size
        if start < 0 or start > size or length < 0:
            return None
        return self._root[start:start + length]
