# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Traversal and assignment engine.

- fetch: read-only path traversal with else/raise policy
- assign: auto-vivifying assignment
"""

from ..options import NATIVE
from .assign import assign
from .fetch import build_error, fetch, node_fetch

__all__ = ["NATIVE", "assign", "build_error", "fetch", "node_fetch"]
