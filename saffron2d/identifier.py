"""Random 64-bit identifiers."""

from __future__ import annotations

import random

_MAX = (1 << 64) - 1
_rng = random.SystemRandom()


class UUID:
    """A 64-bit identifier; random unless a value is given."""

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None) -> None:
        if value is None:
            value = _rng.getrandbits(64)
        value = int(value)
        if not 0 <= value <= _MAX:
            raise ValueError(f"identifier out of 64-bit range: {value}")
        self._value = value

    @classmethod
    def null(cls) -> UUID:
        """The identifier with value zero."""
        return cls(0)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"UUID({self._value})"