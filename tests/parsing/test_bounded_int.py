"""Unit tests for fixed-width integer types."""

import pytest

from confee import Int8, Int32, Port, UInt8, UInt16, UInt64, parse_value, try_parse


class TestBoundedInt:
    """範囲付き整数"""

    def test_uint16_from_text(self):
        value = UInt16.from_text("8080")
        assert value == 8080
        assert isinstance(value, int)
        assert repr(value) == "UInt16(8080)"

    @pytest.mark.parametrize(
        "cls,text,expected",
        [
            (UInt8, "0", 0),
            (UInt8, "255", 255),
            (UInt8, "256", None),
            (UInt8, "-1", None),
            (Int8, "-128", -128),
            (Int8, "128", None),
            (UInt16, "65535", 65535),
            (UInt16, "65536", None),
            (Int32, "-2147483648", -2147483648),
            (UInt64, "18446744073709551615", 2**64 - 1),
        ],
    )
    def test_bounds(self, cls, text, expected):
        assert try_parse(text, cls) == expected

    @pytest.mark.parametrize(
        "text", ["0x1f90", "8080.0", "", "port", "8_080", "\u0668\u0660\u0668\u0660", "-0", "- 1"]
    )
    def test_rejects_non_decimal_text(self, text):
        assert try_parse(text, UInt16) is None

    def test_surrounding_whitespace(self):
        assert parse_value(" 8080 ", UInt16) == 8080

    def test_port_alias(self):
        assert Port is UInt16

    def test_direct_construction_checks_range(self):
        with pytest.raises(ValueError):
            UInt8(300)

    def test_signed_types_accept_signs(self):
        assert parse_value("-0", Int8) == 0
        assert parse_value("+12", Int8) == 12
        assert parse_value("+12", UInt8) == 12
