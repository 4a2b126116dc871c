"""
Тесты времени суток

Проверяет:
1. Диапазоны Hour24 / Hour12 / Minute / Second
2. Части суток (DayPart)
3. LinearTime: 八点五秒, 下午三点十分
4. DeltaTime: 钟 / 过 / 刻 / 半 / 差
"""

import pytest

from chinese_format import (
    TRADITIONAL_CONTEXT,
    HourOutOfRange,
    MinuteOutOfRange,
    SecondOutOfRange,
    chinese_text,
)
from chinese_format.gregorian import (
    DayPart,
    DeltaTime,
    Hour12,
    Hour24,
    LinearTime,
    Minute,
    Second,
)


def linear(hour: int, minute: int, second=None, day_part: bool = False) -> str:
    time = LinearTime(
        hour=Hour24(hour),
        minute=Minute(minute),
        second=Second(second) if second is not None else None,
        day_part=day_part,
    )
    return chinese_text(time)


def delta(hour: int, minute: int) -> str:
    return chinese_text(DeltaTime(hour=Hour12(hour), minute=Minute(minute)))


class TestClockFields:
    """Тесты полей часов"""

    def test_hour24_range(self) -> None:
        Hour24(0)
        Hour24(23)
        with pytest.raises(HourOutOfRange, match="Hour out of range: 24"):
            Hour24(24)

    def test_hour12_range(self) -> None:
        with pytest.raises(HourOutOfRange):
            Hour12(0)
        with pytest.raises(HourOutOfRange):
            Hour12(13)

    @pytest.mark.parametrize("hour24, hour12", [(0, 12), (1, 1), (12, 12), (13, 1), (23, 11)])
    def test_hour24_to_hour12(self, hour24: int, hour12: int) -> None:
        assert Hour12.from_hour24(Hour24(hour24)) == Hour12(hour12)

    def test_hour12_next(self) -> None:
        assert Hour12(12).next() == Hour12(1)
        assert Hour12(3).next().value == 4

    def test_hour_count_two(self) -> None:
        assert chinese_text(Hour24(2)) == "两点"
        assert chinese_text(Hour24(2), TRADITIONAL_CONTEXT) == "兩點"

    def test_minute_range(self) -> None:
        with pytest.raises(MinuteOutOfRange, match="Minute out of range: 60"):
            Minute(60)

    def test_minute_complement(self) -> None:
        assert Minute(50).complement() == Minute(10)
        with pytest.raises(MinuteOutOfRange, match="Minute out of range: 60"):
            Minute(0).complement()

    def test_second_range(self) -> None:
        with pytest.raises(SecondOutOfRange, match="Second out of range: 60"):
            Second(60)


class TestDayPart:
    """Части суток"""

    @pytest.mark.parametrize(
        "hour, part",
        [
            (5, DayPart.EARLY_MORNING),
            (7, DayPart.EARLY_MORNING),
            (8, DayPart.MORNING),
            (12, DayPart.MIDDAY),
            (15, DayPart.AFTERNOON),
            (18, DayPart.EARLY_EVENING),
            (21, DayPart.EVENING),
            (23, DayPart.MIDNIGHT),
            (0, DayPart.MIDNIGHT),
            (1, DayPart.MIDNIGHT),
            (2, DayPart.LATE_NIGHT),
            (4, DayPart.LATE_NIGHT),
        ],
    )
    def test_from_hour(self, hour: int, part: DayPart) -> None:
        assert DayPart.from_hour(hour) is part
        assert Hour24(hour).day_part() is part

    def test_rendering(self) -> None:
        assert chinese_text(DayPart.AFTERNOON) == "下午"

    def test_out_of_range(self) -> None:
        with pytest.raises(HourOutOfRange):
            DayPart.from_hour(24)


class TestLinearTime:
    """Время по циферблату"""

    def test_hour_and_minutes(self) -> None:
        assert linear(8, 5) == "八点五分"
        assert linear(2, 30) == "两点三十分"

    def test_whole_hour(self) -> None:
        assert linear(8, 0) == "八点"

    def test_zero_minutes_skipped_before_seconds(self) -> None:
        assert linear(8, 0, 5) == "八点五秒"
        assert linear(0, 0, 30) == "零点三十秒"

    def test_with_seconds(self) -> None:
        assert linear(12, 30, 45) == "十二点三十分四十五秒"

    def test_zero_hour_always_written(self) -> None:
        assert linear(0, 5) == "零点五分"
        assert linear(0, 0) == "零点"

    def test_day_part(self) -> None:
        assert linear(15, 10, day_part=True) == "下午三点十分"
        assert linear(14, 2, day_part=True) == "下午两点二分"
        assert linear(0, 0, day_part=True) == "午夜十二点"

    def test_traditional(self) -> None:
        time = LinearTime(hour=Hour24(9), minute=Minute(15))
        assert chinese_text(time, TRADITIONAL_CONTEXT) == "九點十五分"

    def test_from_seconds(self) -> None:
        assert chinese_text(LinearTime.from_seconds(3661)) == "一点一分一秒"
        assert chinese_text(LinearTime.from_seconds(8 * 3600 + 5)) == "八点五秒"

    def test_from_seconds_out_of_range(self) -> None:
        with pytest.raises(HourOutOfRange):
            LinearTime.from_seconds(86400)


class TestDeltaTime:
    """Разговорная запись относительно часа"""

    def test_on_the_hour(self) -> None:
        assert delta(3, 0) == "三点钟"
        assert chinese_text(
            DeltaTime(hour=Hour12(3), minute=Minute(0)), TRADITIONAL_CONTEXT
        ) == "三點鐘"

    def test_past(self) -> None:
        assert delta(3, 5) == "三点过五分"
        assert delta(3, 29) == "三点过二十九分"

    def test_quarter(self) -> None:
        assert delta(3, 15) == "三点刻"
        assert delta(6, 15) == "六点刻"
        assert chinese_text(
            DeltaTime(hour=Hour12(6), minute=Minute(15)), TRADITIONAL_CONTEXT
        ) == "六點刻"

    def test_half(self) -> None:
        assert delta(3, 30) == "三点半"

    def test_three_quarters(self) -> None:
        assert delta(3, 45) == "三点三刻"

    def test_to_next_hour(self) -> None:
        assert delta(3, 50) == "四点差十分"
        assert delta(12, 55) == "一点差五分"
