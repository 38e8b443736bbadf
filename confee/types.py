"""Fixed-width integer value types for typed configuration lookups."""

from __future__ import annotations

import re
from typing import ClassVar, TypeVar

__all__ = [
    "BoundedInt",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Port",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]

B = TypeVar("B", bound="BoundedInt")

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class BoundedInt(int):
    """
    ``int`` restricted to ``[MIN, MAX]``

    Subclasses only set the bounds. Values are parsed as base-10 text of
    ASCII digits with an optional sign, so ``store.get("port", UInt16)``
    accepts ``"8080"`` but rejects ``"70000"``, ``"-1"``, ``"0x1f90"``
    and ``"8_080"``. Unsigned types reject any ``-`` sign, even ``"-0"``.
    """

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __new__(cls: type[B], value: int | str = 0) -> B:
        number = cls._parse_text(value) if isinstance(value, str) else int(value)
        if not cls.MIN <= number <= cls.MAX:
            raise ValueError(
                f"{number} out of range for {cls.__name__} [{cls.MIN}, {cls.MAX}]"
            )
        return super().__new__(cls, number)

    @classmethod
    def _parse_text(cls, text: str) -> int:
        if _DECIMAL.fullmatch(text) is None:
            raise ValueError(f"invalid decimal literal for {cls.__name__}: {text!r}")
        if cls.MIN == 0 and text.startswith("-"):
            raise ValueError(f"{cls.__name__} is unsigned: {text!r}")
        return int(text, 10)

    @classmethod
    def from_text(cls: type[B], text: str) -> B:
        return cls(text.strip())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class UInt8(BoundedInt):
    MIN, MAX = 0, 2**8 - 1


class UInt16(BoundedInt):
    MIN, MAX = 0, 2**16 - 1


class UInt32(BoundedInt):
    MIN, MAX = 0, 2**32 - 1


class UInt64(BoundedInt):
    MIN, MAX = 0, 2**64 - 1


class Int8(BoundedInt):
    MIN, MAX = -(2**7), 2**7 - 1


class Int16(BoundedInt):
    MIN, MAX = -(2**15), 2**15 - 1


class Int32(BoundedInt):
    MIN, MAX = -(2**31), 2**31 - 1


class Int64(BoundedInt):
    MIN, MAX = -(2**63), 2**63 - 1


Port = UInt16
