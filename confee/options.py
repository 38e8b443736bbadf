"""ConfigStore の設定

区切り文字と上書きファイルのパスをまとめて保持する。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import InvalidDelimiterError

DEFAULT_DELIMITER = ":"

PathLike = Union[str, "os.PathLike[str]"]


def validate_delimiter(delimiter: Any) -> str:
    """区切り文字が1文字の文字列であることを確認して返す"""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidDelimiterError(delimiter)
    return delimiter


@dataclass(frozen=True, slots=True)
class StoreOptions:
    """
    ConfigStore の設定

    Usage:
        # デフォルト設定（区切り文字 ':'、ファイル未指定）
        options = StoreOptions()

        # カスタム設定
        options = StoreOptions(delimiter="=", source_path=Path("app.conf"))

        # 辞書から作成
        options = StoreOptions.from_dict({"delimiter": "="})
    """

    # キーと値の区切り文字（None の場合は DEFAULT_DELIMITER）
    delimiter: Optional[str] = None

    # 上書きファイルのパス
    source_path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.delimiter is not None:
            validate_delimiter(self.delimiter)
        if self.source_path is not None and not isinstance(self.source_path, Path):
            object.__setattr__(self, "source_path", Path(self.source_path))

    def effective_delimiter(self) -> str:
        """有効な区切り文字を返す"""
        if self.delimiter is not None:
            return self.delimiter
        return DEFAULT_DELIMITER

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> StoreOptions:
        """辞書から設定を作成"""
        source_path = config.get("source_path")
        return cls(
            delimiter=config.get("delimiter"),
            source_path=Path(source_path) if source_path is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "delimiter": self.delimiter,
            "source_path": str(self.source_path) if self.source_path is not None else None,
        }
