# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Per-call options, the PUSH marker and lookup result types.

Options can be given either as an :class:`Options` instance or as a plain
mapping using the field names ``else``, ``raise`` and ``allowPush``::

    >>> tree.get('a', 'b', options={'else': 0})
    >>> tree.get('a', 'b', options=Options(default=0))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


class _Marker:
    """Named singleton sentinel."""

    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __copy__(self) -> _Marker:
        return self

    def __deepcopy__(self, memo: dict) -> _Marker:
        return self


#: Key meaning "append a new element" instead of addressing an index.
PUSH = _Marker('PUSH')

#: Default for Options.default, distinct from None.
MISSING = _Marker('MISSING')

#: Returned by assign() for one-key map writes left to the container itself.
NATIVE = _Marker('NATIVE')


# Mapping spelling -> dataclass field
_OPTION_FIELDS = {
    'else': 'default',
    'raise': 'raise_',
    'allowPush': 'allow_push',
    'allow_push': 'allow_push',
}


@dataclass(frozen=True)
class Options:
    """Options bag for fetch/get/set calls.

    Attributes:
        default: Value returned when a read path is missing (``else``).
            Left as MISSING, a miss raises.
        raise_: ``True`` to always raise the lookup error, or an error spec
            (exception class, exception instance, or ``(cls, *args)``) to
            raise instead of it (``raise``).
        allow_push: When False, PUSH is an ordinary key (``allowPush``).
    """

    default: Any = MISSING
    raise_: Any = None
    allow_push: bool = True

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @classmethod
    def coerce(cls, options: Options | Mapping[str, Any] | None) -> Options:
        """Build an Options from None, an Options, or a mapping.

        Raises:
            TypeError: If options is of another type or names an unknown field.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            kwargs: dict[str, Any] = {}
            for name, value in options.items():
                field = _OPTION_FIELDS.get(name)
                if field is None:
                    raise TypeError(f"Unknown option: {name!r}")
                kwargs[field] = value
            return cls(**kwargs)
        raise TypeError(
            f"options must be Options, a mapping or None, not {type(options).__name__}"
        )

    def push_enabled(self) -> bool:
        return self.allow_push is not False

    def is_push(self, key: Any) -> bool:
        """True if key is PUSH and push mode is enabled."""
        return key is PUSH and self.push_enabled()


OptionsLike = Union[Options, Mapping[str, Any], None]


@dataclass(frozen=True)
class Found:
    """Successful single-step lookup."""

    value: Any


@dataclass(frozen=True)
class NotFound:
    """Failed single-step lookup, carrying the error to surface."""

    error: Exception


LookupResult = Union[Found, NotFound]
