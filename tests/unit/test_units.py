"""
Тесты единиц длины и веса
"""

import pytest
from pydantic import ValidationError

from chinese_format import TRADITIONAL_CONTEXT, chinese_text, to_chinese
from chinese_format.length import Centimeter, Decimeter, Kilometer, Li, Meter, Millimeter
from chinese_format.weight import Jin, Kilogram


class TestLength:
    """Тесты единиц длины"""

    @pytest.mark.parametrize(
        "measure, expected",
        [
            (Kilometer(3), "三公里"),
            (Li(90), "九十里"),
            (Meter(2), "两米"),
            (Decimeter(15), "十五分米"),
            (Centimeter(7), "七厘米"),
            (Millimeter(305), "三百零五毫米"),
        ],
    )
    def test_rendering(self, measure, expected: str) -> None:
        assert chinese_text(measure) == expected

    def test_traditional(self) -> None:
        assert chinese_text(Centimeter(2), TRADITIONAL_CONTEXT) == "兩釐米"

    def test_zero(self) -> None:
        sequence = to_chinese(Kilometer(0))
        assert sequence.to_text() == "零公里"
        assert sequence.is_omissible()

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Meter(-1)


class TestWeight:
    """Тесты единиц веса"""

    def test_jin(self) -> None:
        assert chinese_text(Jin(2)) == "两斤"

    def test_kilogram(self) -> None:
        assert chinese_text(Kilogram(10)) == "十公斤"

    def test_value(self) -> None:
        assert Kilogram(12).value == 12

    def test_defined_in_own_module(self) -> None:
        assert Kilogram.__module__ == "chinese_format.weight"
        assert Meter.__module__ == "chinese_format.length"
