"""Flat key/value configuration table with file overrides and typed reads."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar, Union, overload

from .exceptions import ConfigReadError, MalformedLineError, ParseError
from .options import DEFAULT_DELIMITER, PathLike, StoreOptions, validate_delimiter
from .parsing import parse_value

logger = logging.getLogger(__name__)

__all__ = ["ConfigStore"]

T = TypeVar("T")

Defaults = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class ConfigStore:
    """
    デフォルト値と上書きファイルから成る設定テーブル

    The key set is fixed by the defaults given at construction. Loading the
    override file with :meth:`update` only replaces values of keys that
    already exist; unknown keys in the file are ignored, so a typo there
    never creates a dead entry.

    Usage:
        conf = ConfigStore.from_pairs({"addr": "127.0.0.1", "port": "8080"})
        conf.with_delimiter("=").with_source_path("app.conf").update()

        port = conf.get("port", UInt16)   # 8080, or None if unparsable
        addr = conf["addr"]               # raw string, "" if missing
    """

    def __init__(self, defaults: Defaults, options: Optional[StoreOptions] = None) -> None:
        self._entries: Dict[str, str] = dict(defaults)
        self._delimiter: Optional[str] = None
        self._source_path: Optional[Path] = None
        self._updated = False
        self._lock = threading.RLock()
        if options is not None:
            self.configure(options)

    @classmethod
    def from_pairs(cls, defaults: Defaults) -> ConfigStore:
        """Build a store whose recognised keys are exactly those in ``defaults``."""
        return cls(defaults)

    # Configuration ---------------------------------------------------------

    def with_delimiter(self, delimiter: str) -> ConfigStore:
        with self._lock:
            self._delimiter = validate_delimiter(delimiter)
        return self

    def with_source_path(self, path: PathLike) -> ConfigStore:
        """Record the override file. The file is not opened until :meth:`update`."""
        with self._lock:
            self._source_path = Path(path)
        return self

    with_file = with_source_path

    def configure(self, options: StoreOptions) -> ConfigStore:
        """Apply every setting carried by ``options``."""
        with self._lock:
            if options.delimiter is not None:
                self._delimiter = options.delimiter
            if options.source_path is not None:
                self._source_path = options.source_path
        return self

    @property
    def delimiter(self) -> str:
        return self._delimiter if self._delimiter is not None else DEFAULT_DELIMITER

    @property
    def source_path(self) -> Optional[Path]:
        return self._source_path

    @property
    def options(self) -> StoreOptions:
        return StoreOptions(delimiter=self._delimiter, source_path=self._source_path)

    @property
    def is_updated(self) -> bool:
        """True once :meth:`update` has completed successfully."""
        return self._updated

    # Loading ---------------------------------------------------------------

    def update(self) -> None:
        """
        上書きファイルを読み込み、既存キーの値を置き換える

        Raises:
            ConfigReadError: No source path is set, or the file cannot be
                read as UTF-8. Nothing is changed.
            MalformedLineError: A non-empty line has no delimiter. Lines
                before it have already been applied; later lines are not read.
        """
        with self._lock:
            text = self._read_source()
            delimiter = self.delimiter
            applied = skipped = 0

            for line_number, line in enumerate(_split_lines(text), start=1):
                if not line:
                    continue
                key, sep, value = line.partition(delimiter)
                if not sep:
                    raise MalformedLineError(line, line_number, delimiter)
                key = key.strip()
                if key not in self._entries:
                    logger.debug("Ignoring unknown key %r at line %d of %s", key, line_number, self._source_path)
                    skipped += 1
                    continue
                self._entries[key] = value.strip()
                applied += 1

            self._updated = True
            logger.debug(
                "Loaded %s: %d value(s) applied, %d unknown key(s) ignored",
                self._source_path,
                applied,
                skipped,
            )

    def _read_source(self) -> str:
        path = self._source_path
        if path is None:
            raise ConfigReadError(None, "no source path configured")
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigReadError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise ConfigReadError(path, e.strerror or str(e)) from e

    # Reading ---------------------------------------------------------------

    @overload
    def get(self, key: str) -> Optional[str]:
        ...

    @overload
    def get(self, key: str, type_: Callable[[str], T]) -> Optional[T]:
        ...

    def get(self, key, type_=str):
        """
        Return the value of ``key`` converted to ``type_``.

        ``None`` both when ``key`` is unknown and when its value cannot be
        converted; the two cases are not distinguished.
        """
        with self._lock:
            text = self._entries.get(key)
        if text is None:
            return None
        try:
            return parse_value(text, type_)
        except ParseError as e:
            logger.debug("Value of %r unusable: %s", key, e)
            return None

    def index(self, key: str) -> str:
        """Raw stored string for ``key``, or ``""`` when it is unknown."""
        with self._lock:
            return self._entries.get(key, "")

    def __getitem__(self, key: str) -> str:
        return self.index(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def as_dict(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._entries)

    # Rendering -------------------------------------------------------------

    def display(self) -> str:
        """One ``key<delimiter> value`` line per entry."""
        with self._lock:
            delimiter = self.delimiter
            return "".join(f"{key}{delimiter} {value}\n" for key, value in self._entries.items())

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={self._entries!r}, delimiter={self.delimiter!r}, "
            f"source_path={self._source_path!r}, updated={self._updated!r})"
        )


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
