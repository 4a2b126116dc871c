"""
Gregorian Time — время суток

- Hour24 (0..23), Hour12 (1..12), Minute (0..59), Second (0..59):
  меры с одной единицей (点 / 分 / 秒)
- DayPart: часть суток по часу (早上, 上午, ... 深夜)
- LinearTime: 八点五秒, 下午三点十分 (мера часы / минуты / секунды)
- DeltaTime: разговорная запись относительно часа (三点过五分, 三点半, 四点差十分)
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Mapping, Optional

from pydantic import BaseModel

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.errors import HourOutOfRange, MinuteOutOfRange, SecondOutOfRange
from chinese_format.measure import Quantity, Scale, ZeroPolicy, define_measure, unit_measure
from chinese_format.numbers import Count
from chinese_format.placeholders import EmptyPlaceholder
from chinese_format.protocol import Variants, compose
from chinese_format.sequence import LogogramSequence


logger = logging.getLogger(__name__)

SECONDS_PER_HOUR: Final[int] = 3600
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_DAY: Final[int] = 24 * SECONDS_PER_HOUR

HOUR_UNIT: Final[Variants] = Variants("点", "點")
MINUTE_UNIT: Final[str] = "分"
SECOND_UNIT: Final[str] = "秒"


# =============================================================================
# CLOCK FIELDS
# =============================================================================


class Hour24(unit_measure("Hour24Measure", HOUR_UNIT)):
    def __init__(self, magnitude: int, **data: Any) -> None:
        if not 0 <= magnitude <= 23:
            raise HourOutOfRange(magnitude)
        super().__init__(magnitude, **data)

    def to_hour12(self) -> "Hour12":
        if self.value == 0:
            return Hour12(12)
        if self.value > 12:
            return Hour12(self.value - 12)
        return Hour12(self.value)

    def day_part(self) -> "DayPart":
        return DayPart.from_hour(self.value)


class Hour12(unit_measure("Hour12Measure", HOUR_UNIT)):
    def __init__(self, magnitude: int, **data: Any) -> None:
        if not 1 <= magnitude <= 12:
            raise HourOutOfRange(magnitude)
        super().__init__(magnitude, **data)

    @classmethod
    def from_hour24(cls, hour: Hour24) -> "Hour12":
        return hour.to_hour12()

    def next(self) -> "Hour12":
        """Следующий час по циферблату: после 12 идёт 1."""
        return Hour12(1 if self.value == 12 else self.value + 1)


class Minute(unit_measure("MinuteMeasure", MINUTE_UNIT, quantity=Quantity.INTEGER)):
    def __init__(self, magnitude: int, **data: Any) -> None:
        if not 0 <= magnitude <= 59:
            raise MinuteOutOfRange(magnitude)
        super().__init__(magnitude, **data)

    def complement(self) -> "Minute":
        """
        Минуты до следующего часа.

        Raises:
            MinuteOutOfRange: Для 0 минут (дополнение равно 60)
        """
        return Minute(SECONDS_PER_MINUTE - self.value)


class Second(unit_measure("SecondMeasure", SECOND_UNIT, quantity=Quantity.INTEGER)):
    def __init__(self, magnitude: int, **data: Any) -> None:
        if not 0 <= magnitude <= 59:
            raise SecondOutOfRange(magnitude)
        super().__init__(magnitude, **data)


# =============================================================================
# DAY PART
# =============================================================================


class DayPart(str, Enum):
    EARLY_MORNING = "早上"
    MORNING = "上午"
    MIDDAY = "中午"
    AFTERNOON = "下午"
    EARLY_EVENING = "傍晚"
    EVENING = "晚上"
    MIDNIGHT = "午夜"
    LATE_NIGHT = "深夜"

    @classmethod
    def from_hour(cls, hour: int) -> "DayPart":
        """
        Raises:
            HourOutOfRange: Если час вне 0..23
        """
        if hour not in DAY_PART_BY_HOUR:
            raise HourOutOfRange(hour)
        return DAY_PART_BY_HOUR[hour]

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        return LogogramSequence.from_text(self.value)


def _day_parts() -> Mapping[int, DayPart]:
    table = {}
    for hours, part in (
        ((5, 6, 7), DayPart.EARLY_MORNING),
        ((8, 9, 10), DayPart.MORNING),
        ((11, 12, 13), DayPart.MIDDAY),
        ((14, 15, 16), DayPart.AFTERNOON),
        ((17, 18, 19), DayPart.EARLY_EVENING),
        ((20, 21, 22), DayPart.EVENING),
        ((23, 0, 1), DayPart.MIDNIGHT),
        ((2, 3, 4), DayPart.LATE_NIGHT),
    ):
        for hour in hours:
            table[hour] = part
    return MappingProxyType(table)


DAY_PART_BY_HOUR: Final[Mapping[int, DayPart]] = _day_parts()


# =============================================================================
# LINEAR TIME
# =============================================================================


# 0 часов пишется всегда (零点五分), нулевые минуты опускаются (八点五秒)
ClockReading = define_measure(
    "ClockReading",
    [
        Scale(name="hours", divisor=SECONDS_PER_HOUR, unit=HOUR_UNIT, policy=ZeroPolicy.ALWAYS),
        Scale(
            name="minutes",
            divisor=SECONDS_PER_MINUTE,
            unit=MINUTE_UNIT,
            policy=ZeroPolicy.OMIT,
            quantity=Quantity.INTEGER,
        ),
        Scale(name="seconds", divisor=1, unit=SECOND_UNIT, quantity=Quantity.INTEGER),
    ],
    module=__name__,
)


class LinearTime(BaseModel):
    """
    Время по циферблату.

    day_part=True: 12-часовая запись с частью суток (15:10 → 下午三点十分).
    """

    hour: Hour24
    minute: Minute
    second: Optional[Second] = None
    day_part: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_seconds(cls, seconds: int, day_part: bool = False) -> "LinearTime":
        """
        Время по числу секунд с начала суток.

        Raises:
            HourOutOfRange: Если seconds вне [0, 86400)
        """
        if not 0 <= seconds < SECONDS_PER_DAY:
            logger.debug("Rejected time of day: %s seconds", seconds)
            raise HourOutOfRange(seconds // SECONDS_PER_HOUR)

        hours, rest = divmod(seconds, SECONDS_PER_HOUR)
        minutes, rest = divmod(rest, SECONDS_PER_MINUTE)
        return cls(hour=Hour24(hours), minute=Minute(minutes), second=Second(rest), day_part=day_part)

    @property
    def clock(self) -> ClockReading:
        """Показание циферблата; в режиме day_part час 12-часовой."""
        hour = self.hour.to_hour12().value if self.day_part else self.hour.value
        second = self.second.value if self.second is not None else 0
        return ClockReading.from_parts(hours=hour, minutes=self.minute.value, seconds=second)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        day_part = self.hour.day_part() if self.day_part else None
        return compose(context, (EmptyPlaceholder(day_part), self.clock))


# =============================================================================
# DELTA TIME
# =============================================================================


ZHONG: Final[Variants] = Variants("钟", "鐘")
GUO: Final[Variants] = Variants("过", "過")
KE: Final[str] = "刻"
BAN: Final[str] = "半"
CHA: Final[str] = "差"


class DeltaTime(BaseModel):
    """
    Разговорная запись времени относительно часа.

    0 → 三点钟, 1..29 → 三点过五分, 15 → 三点刻, 30 → 三点半,
    45 → 三点三刻, иначе → 四点差十分 (минуты до следующего часа)
    """

    hour: Hour12
    minute: Minute

    model_config = {"frozen": True}

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        minute = self.minute.value
        if minute == 0:
            parts = (self.hour, ZHONG)
        elif minute == 15:
            parts = (self.hour, KE)
        elif minute == 30:
            parts = (self.hour, BAN)
        elif minute == 45:
            parts = (self.hour, Count(3), KE)
        elif minute < 30:
            parts = (self.hour, GUO, self.minute)
        else:
            parts = (self.hour.next(), CHA, self.minute.complement())
        return compose(context, parts)
