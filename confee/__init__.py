"""Canonical re-exports for the confee public API.

- ConfigStore: デフォルト値 + 上書きファイル + 型付き取得
- StoreOptions: 区切り文字・ファイルパスの設定
- parse_value / register_parser / TextParsable: 文字列から任意の型への変換
- UInt16 などの固定幅整数型
- ConfigError 以下の例外クラス
"""

from .exceptions import (
    ConfigError,
    ConfigReadError,
    InvalidDelimiterError,
    MalformedLineError,
    ParseError,
)
from .options import DEFAULT_DELIMITER, StoreOptions
from .parsing import (
    IPAddress,
    TextParsable,
    parse_bool,
    parse_value,
    register_parser,
    try_parse,
    unregister_parser,
)
from .store import ConfigStore
from .types import (
    BoundedInt,
    Int8,
    Int16,
    Int32,
    Int64,
    Port,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    "ConfigStore",
    "StoreOptions",
    "DEFAULT_DELIMITER",
    # Parsing
    "IPAddress",
    "TextParsable",
    "parse_bool",
    "parse_value",
    "register_parser",
    "try_parse",
    "unregister_parser",
    # Value types
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
    # Errors
    "ConfigError",
    "ConfigReadError",
    "InvalidDelimiterError",
    "MalformedLineError",
    "ParseError",
]
