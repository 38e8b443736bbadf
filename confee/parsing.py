"""Parse-on-read conversion of stored strings into caller-requested types.

A target type takes part in one of three ways, checked in order:

1. a parser registered for it with :func:`register_parser`;
2. a ``from_text`` classmethod (the :class:`TextParsable` capability);
3. its own constructor called with the text, e.g. ``int``, ``float``,
   ``pathlib.Path``, ``ipaddress.IPv4Address``.

New value types therefore never require changes to :class:`~confee.store.ConfigStore`.
"""

from __future__ import annotations

import ipaddress
import threading
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar, Union, runtime_checkable

from .exceptions import ParseError

__all__ = [
    "IPAddress",
    "ParserRegistry",
    "TextParsable",
    "get_parser",
    "parse_bool",
    "parse_value",
    "register_parser",
    "try_parse",
    "unregister_parser",
]

T = TypeVar("T")

Parser = Callable[[str], Any]

# Either address family; resolved through ipaddress.ip_address
IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


@runtime_checkable
class TextParsable(Protocol):
    """Types that know how to build themselves from configuration text.

    ``from_text`` must raise ``ValueError`` when the text is not acceptable.
    """

    @classmethod
    def from_text(cls, text: str) -> Any:
        ...


def parse_bool(text: str) -> bool:
    """Parse ``true/false``, ``yes/no``, ``on/off`` or ``1/0`` (case-insensitive)."""
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


class ParserRegistry:
    """Target type → parser function mapping shared by every store."""

    _parsers: Dict[Any, Parser] = {}
    _lock = threading.Lock()

    @classmethod
    def register(cls, target: Any, parser: Parser) -> None:
        if not callable(parser):
            raise TypeError(f"parser for {target!r} must be callable")
        with cls._lock:
            cls._parsers[target] = parser

    @classmethod
    def unregister(cls, target: Any) -> Optional[Parser]:
        with cls._lock:
            return cls._parsers.pop(target, None)

    @classmethod
    def get(cls, target: Any) -> Optional[Parser]:
        with cls._lock:
            return cls._parsers.get(target)

    @classmethod
    def get_all(cls) -> Dict[Any, Parser]:
        with cls._lock:
            return dict(cls._parsers)


def register_parser(target: Any, parser: Parser) -> None:
    """Use ``parser`` whenever a value is requested as ``target``."""
    ParserRegistry.register(target, parser)


def unregister_parser(target: Any) -> Optional[Parser]:
    """Remove the parser registered for ``target`` and return it."""
    return ParserRegistry.unregister(target)


def get_parser(target: Any) -> Optional[Parser]:
    return ParserRegistry.get(target)


def _resolve(target: Any) -> Parser:
    parser = ParserRegistry.get(target)
    if parser is not None:
        return parser
    from_text = getattr(target, "from_text", None)
    if callable(from_text):
        return from_text
    if callable(target):
        return target
    raise TypeError(f"{target!r} cannot be parsed from text")


def parse_value(text: str, target: Callable[[str], T]) -> T:
    """
    Convert ``text`` into ``target``.

    Args:
        text: Stored configuration value.
        target: Requested type (or any callable taking one string).

    Returns:
        The converted value.

    Raises:
        ParseError: ``text`` is not acceptable for ``target``.
    """
    parser = _resolve(target)
    try:
        return parser(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ParseError(text, target) from e


def try_parse(text: str, target: Callable[[str], T]) -> Optional[T]:
    """Like :func:`parse_value` but return ``None`` on failure."""
    try:
        return parse_value(text, target)
    except ParseError:
        return None


register_parser(bool, parse_bool)
register_parser(IPAddress, ipaddress.ip_address)
