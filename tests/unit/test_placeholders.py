"""
Тесты заполнителей: LingPlaceholder, EmptyPlaceholder, LeftPadder
"""

from chinese_format import (
    TRADITIONAL_CONTEXT,
    EmptyPlaceholder,
    Fragment,
    LeftPadder,
    LingPlaceholder,
    LogogramSequence,
    chinese_text,
    to_chinese,
)


class TestLingPlaceholder:
    """Опускаемое значение заменяется на 零"""

    def test_zero(self) -> None:
        assert to_chinese(LingPlaceholder(0)) == LogogramSequence.of(
            Fragment(logograms="零", omissible=True)
        )

    def test_empty_string(self) -> None:
        assert chinese_text(LingPlaceholder("")) == "零"

    def test_none(self) -> None:
        assert chinese_text(LingPlaceholder(None)) == "零"

    def test_non_omissible_unchanged(self) -> None:
        assert to_chinese(LingPlaceholder(5)) == to_chinese(5)


class TestEmptyPlaceholder:
    """Опускаемое значение заменяется пустой строкой"""

    def test_zero(self) -> None:
        sequence = to_chinese(EmptyPlaceholder(0))
        assert sequence.to_text() == ""
        assert sequence.is_omissible()
        assert len(sequence) == 1

    def test_non_omissible_unchanged(self) -> None:
        assert chinese_text(EmptyPlaceholder((9, "月"))) == "九月"


class TestLeftPadder:
    """Дополнение слева"""

    def test_pads(self) -> None:
        assert chinese_text(LeftPadder(5, "零", 2)) == "零五"

    def test_wide_enough(self) -> None:
        assert chinese_text(LeftPadder(15, "零", 2)) == "十五"
        assert chinese_text(LeftPadder(123, "零", 2)) == "一百二十三"

    def test_keeps_omissibility(self) -> None:
        sequence = to_chinese(LeftPadder(0, "零", 3))
        assert sequence.to_text() == "零零零"
        assert sequence.is_omissible()

    def test_context_threaded(self) -> None:
        assert chinese_text(LeftPadder(-1, "〇", 3), TRADITIONAL_CONTEXT) == "〇負一"
