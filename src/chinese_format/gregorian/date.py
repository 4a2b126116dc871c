"""
Gregorian Date — поля даты и их сборка

Поля даты — меры с одной единицей:
- Year: поцифровая запись + 年 (二零二四年)
- Month: 1..12 + 月
- Day: 1..31 + 号/號 (формально) или 日 (неформально)
- StyledWeekDay: 星期 / 周 / 礼拜 + номер дня (воскресенье: 天 или 日)

Date при создании проверяет набор полей (DatePattern) и существование
даты; DateBuilder собирает поля из чисел. Date пишет присутствующие поля
по порядку, хвостовые пустые поля отбрасываются.
"""

import logging
from enum import Enum, IntEnum
from typing import Any, Final, Optional

from pydantic import BaseModel

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.errors import (
    DayOutOfRange,
    InvalidDate,
    InvalidDatePattern,
    MonthOutOfRange,
    WeekDayOutOfRange,
)
from chinese_format.measure import MeasureDefinition, Quantity, Scale, ZeroPolicy, unit_measure
from chinese_format.numbers import DigitSequence
from chinese_format.placeholders import EmptyPlaceholder
from chinese_format.protocol import Variants, compose, to_chinese
from chinese_format.sequence import Fragment, LogogramSequence


logger = logging.getLogger(__name__)


# =============================================================================
# YEAR / MONTH / DAY
# =============================================================================


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


YEAR_UNIT: Final[str] = "年"


class Year(unit_measure("YearMeasure", YEAR_UNIT, quantity=Quantity.DIGITS)):
    """Год: цифры пишутся по одной (1998 → 一九九八年)."""

    def is_leap(self) -> bool:
        return is_leap_year(self.value)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        # Год 0 пишется (零年) и не опускается
        digits = DigitSequence.from_int(self.value).to_chinese(context).to_text()
        return LogogramSequence.of(Fragment(logograms=digits + YEAR_UNIT))


class Month(unit_measure("MonthMeasure", "月", quantity=Quantity.INTEGER)):
    def __init__(self, magnitude: int, **data: Any) -> None:
        if not 1 <= magnitude <= 12:
            raise MonthOutOfRange(magnitude)
        super().__init__(magnitude, **data)


INFORMAL_DAY: Final[MeasureDefinition] = MeasureDefinition(
    name="InformalDay",
    scales=(Scale(name="value", divisor=1, unit="日", policy=ZeroPolicy.ALWAYS),),
    quantity=Quantity.INTEGER,
)


class Day(unit_measure("DayMeasure", Variants("号", "號"), quantity=Quantity.INTEGER)):
    """День месяца: 号 в формальном стиле, 日 в неформальном."""

    formal: bool = True

    def __init__(self, magnitude: int, **data: Any) -> None:
        if not 1 <= magnitude <= 31:
            raise DayOutOfRange(magnitude)
        super().__init__(magnitude, **data)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        if self.formal:
            return super().to_chinese(context)
        return INFORMAL_DAY.render(self.magnitude, context)


# =============================================================================
# WEEK DAY
# =============================================================================


class WeekDay(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "WeekDay":
        """
        Raises:
            WeekDayOutOfRange: Если номер вне 0..6
        """
        if not 0 <= ordinal <= 6:
            raise WeekDayOutOfRange(ordinal)
        return cls(ordinal)


class WeekFormat(str, Enum):
    """Слово «неделя» перед номером дня."""

    XING_QI = "xing_qi"  # 星期
    ZHOU = "zhou"  # 周
    LI_BAI = "li_bai"  # 礼拜 / 禮拜

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        if self is WeekFormat.XING_QI:
            return to_chinese("星期", context)
        if self is WeekFormat.ZHOU:
            return to_chinese("周", context)
        return to_chinese(Variants("礼拜", "禮拜"), context)


class StyledWeekDay(BaseModel):
    week_day: WeekDay
    week_format: WeekFormat = WeekFormat.XING_QI

    model_config = {"frozen": True}

    def ordinal(self, context: Context) -> LogogramSequence:
        if self.week_day is WeekDay.SUNDAY:
            return to_chinese("日" if self.week_format is WeekFormat.ZHOU else "天", context)
        return to_chinese(int(self.week_day), context)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        return LogogramSequence.of(
            compose(context, (self.week_format, self.ordinal(context))).collect()
        )


# =============================================================================
# PATTERN
# =============================================================================


class DatePattern(str, Enum):
    """
    Допустимые наборы полей даты.

    Значение — флаги в порядке y (год), m (месяц), d (день), w (день недели).
    """

    YEAR = "y"
    MONTH = "m"
    DAY = "d"
    WEEK_DAY = "w"
    YEAR_MONTH = "ym"
    YEAR_MONTH_DAY = "ymd"
    MONTH_DAY = "md"
    MONTH_DAY_WEEK_DAY = "mdw"
    DAY_WEEK_DAY = "dw"
    YEAR_MONTH_DAY_WEEK_DAY = "ymdw"

    @classmethod
    def from_flags(cls, year: bool, month: bool, day: bool, week_day: bool) -> "DatePattern":
        """
        Raises:
            InvalidDatePattern: Если комбинация полей недопустима (например, 'yd')
        """
        flags = "".join(
            flag for flag, present in zip("ymdw", (year, month, day, week_day)) if present
        )
        try:
            return cls(flags)
        except ValueError:
            raise InvalidDatePattern(flags) from None

    @property
    def has_year(self) -> bool:
        return "y" in self.value

    @property
    def has_month(self) -> bool:
        return "m" in self.value

    @property
    def has_day(self) -> bool:
        return "d" in self.value

    @property
    def has_week_day(self) -> bool:
        return "w" in self.value


# =============================================================================
# DATE
# =============================================================================


class Date(BaseModel):
    """
    Дата из проверенных полей.

    Набор полей и существование даты проверяются при создании, поэтому
    недопустимая дата не доходит до конверсии. Удобнее собирать через
    DateBuilder.

    Пример: 1998-8-1, суббота → 一九九八年八月一号星期六

    Raises:
        InvalidDatePattern: Недопустимый набор полей
        InvalidDate: Дата не существует (например, 2023-2-29)
    """

    year: Optional[Year] = None
    month: Optional[Month] = None
    day: Optional[Day] = None
    week_day: Optional[StyledWeekDay] = None

    model_config = {"frozen": True}

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._validate()

    @property
    def pattern(self) -> DatePattern:
        return DatePattern.from_flags(
            self.year is not None,
            self.month is not None,
            self.day is not None,
            self.week_day is not None,
        )

    def _validate(self) -> None:
        pattern = self.pattern
        if not (pattern.has_month and pattern.has_day):
            return

        year = self.year.value if self.year is not None else None
        month, day = self.month.value, self.day.value

        # Без года 29 февраля допустимо
        leap = is_leap_year(year) if year is not None else True
        if month in (4, 6, 9, 11):
            max_day = 30
        elif month == 2:
            max_day = 29 if leap else 28
        else:
            max_day = 31

        if day > max_day:
            logger.debug("Rejected date %s-%s-%s", year, month, day)
            raise InvalidDate(month, day, year)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        fields = (self.year, self.month, self.day, self.week_day)
        return compose(context, [EmptyPlaceholder(field) for field in fields]).trim_end()


class DateBuilder:
    """
    Пошаговое построение даты.

    По умолчанию: формальный стиль (号), неделя 星期.
    Согласованность дня недели с датой не проверяется.
    """

    def __init__(self) -> None:
        self._year: Optional[int] = None
        self._month: Optional[int] = None
        self._day: Optional[int] = None
        self._week_day: Optional[WeekDay] = None
        self._formal = True
        self._week_format = WeekFormat.XING_QI

    def with_year(self, year: int) -> "DateBuilder":
        self._year = year
        return self

    def with_month(self, month: int) -> "DateBuilder":
        self._month = month
        return self

    def with_day(self, day: int) -> "DateBuilder":
        self._day = day
        return self

    def with_week_day(self, week_day: WeekDay) -> "DateBuilder":
        self._week_day = week_day
        return self

    def with_formal(self, formal: bool) -> "DateBuilder":
        self._formal = formal
        return self

    def with_week_format(self, week_format: WeekFormat) -> "DateBuilder":
        self._week_format = week_format
        return self

    def build(self) -> Date:
        """
        Raises:
            InvalidDatePattern: Недопустимый набор полей
            MonthOutOfRange: Месяц вне 1..12
            DayOutOfRange: День вне 1..31
            WeekDayOutOfRange: День недели вне 0..6
            InvalidDate: Дата не существует (например, 2023-2-29)
        """
        # Набор полей проверяется до диапазонов
        DatePattern.from_flags(
            self._year is not None,
            self._month is not None,
            self._day is not None,
            self._week_day is not None,
        )

        year = Year(self._year) if self._year is not None else None
        month = Month(self._month) if self._month is not None else None
        day = Day(self._day, formal=self._formal) if self._day is not None else None

        week_day = None
        if self._week_day is not None:
            week_day = StyledWeekDay(
                week_day=WeekDay.from_ordinal(self._week_day), week_format=self._week_format
            )

        return Date(year=year, month=month, day=day, week_day=week_day)
