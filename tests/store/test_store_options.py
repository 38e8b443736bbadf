"""Unit tests for StoreOptions."""

from pathlib import Path

import pytest

from confee import InvalidDelimiterError, StoreOptions


class TestStoreOptions:
    """StoreOptions 基本機能テスト"""

    def test_default_values(self):
        options = StoreOptions()
        assert options.delimiter is None
        assert options.source_path is None
        assert options.effective_delimiter() == ":"

    def test_custom_values(self):
        options = StoreOptions(delimiter="=", source_path=Path("app.conf"))
        assert options.effective_delimiter() == "="
        assert options.source_path == Path("app.conf")

    def test_str_path_is_converted(self):
        options = StoreOptions(source_path="app.conf")
        assert options.source_path == Path("app.conf")

    def test_frozen(self):
        options = StoreOptions()
        with pytest.raises(Exception):  # FrozenInstanceError
            options.delimiter = "="

    @pytest.mark.parametrize("delimiter", ["", "=>"])
    def test_invalid_delimiter(self, delimiter):
        with pytest.raises(InvalidDelimiterError):
            StoreOptions(delimiter=delimiter)


class TestStoreOptionsDict:
    """from_dict / to_dict"""

    def test_from_dict_empty(self):
        assert StoreOptions.from_dict({}) == StoreOptions()

    def test_from_dict(self):
        options = StoreOptions.from_dict({"delimiter": "=", "source_path": "etc/app.conf"})
        assert options.delimiter == "="
        assert options.source_path == Path("etc/app.conf")

    def test_to_dict(self):
        options = StoreOptions(delimiter="=", source_path=Path("app.conf"))
        assert options.to_dict() == {"delimiter": "=", "source_path": "app.conf"}

    def test_dict_round_trip(self):
        options = StoreOptions(delimiter="|", source_path=Path("app.conf"))
        assert StoreOptions.from_dict(options.to_dict()) == options
