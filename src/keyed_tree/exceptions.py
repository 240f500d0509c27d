# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""KeyedTree exceptions."""

from __future__ import annotations

from typing import Any, Sequence


class KeyedTreeError(Exception):
    """Base exception for KeyedTree errors.

    Attributes:
        key: The key that failed, or None when not tied to a single key.
        path: Keys consumed up to and including the failing one.
    """

    def __init__(
        self,
        message: str,
        key: Any = None,
        path: Sequence[Any] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.path = tuple(path)

    def __str__(self) -> str:
        return self.message


class KeyNotFoundError(KeyedTreeError, KeyError):
    """Raised when a map key is missing during a read."""

    pass


class IndexOutOfRangeError(KeyedTreeError, IndexError):
    """Raised when a sequence index is out of range."""

    pass


class UnsupportedOperationError(KeyedTreeError, TypeError):
    """Raised when a node cannot perform the requested operation.

    Examples: PUSH against a map, descending into a leaf while writing,
    or a node factory asked for a kind it cannot build.
    """

    pass
