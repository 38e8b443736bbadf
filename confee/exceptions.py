"""
設定読み込みエラーの例外クラス階層

上書きファイルの読み込み・解析で発生する各種エラーを分類するための例外クラスを定義。
"""

from __future__ import annotations

from typing import Any


class ConfigError(Exception):
    """設定エラーの基底クラス"""

    pass


class ConfigReadError(ConfigError):
    """上書きファイルの読み込み失敗（未設定のパス、存在しない、権限、エンコーディング）"""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        target = path if path is not None else "<unset>"
        super().__init__(f"Cannot read configuration file {target}: {reason}")


class MalformedLineError(ConfigError):
    """区切り文字を含まない行"""

    def __init__(self, line: str, line_number: int, delimiter: str):
        self.line = line
        self.line_number = line_number
        self.delimiter = delimiter
        super().__init__(
            f"Bad line {line_number} in configuration file "
            f"(no {delimiter!r} delimiter): {line!r}"
        )


class InvalidDelimiterError(ConfigError, ValueError):
    """区切り文字が1文字ではない"""

    def __init__(self, delimiter: Any):
        self.delimiter = delimiter
        super().__init__(f"Delimiter must be a single character, got {delimiter!r}")


class ParseError(ConfigError, ValueError):
    """文字列を指定された型に変換できない"""

    def __init__(self, text: str, target: Any):
        self.text = text
        self.target = target
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Cannot parse {text!r} as {name}")
