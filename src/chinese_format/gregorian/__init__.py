"""
Gregorian — даты и время григорианского календаря.
"""

from chinese_format.gregorian.date import (
    Date,
    DateBuilder,
    DatePattern,
    Day,
    Month,
    StyledWeekDay,
    WeekDay,
    WeekFormat,
    Year,
    is_leap_year,
)
from chinese_format.gregorian.time import (
    ClockReading,
    DayPart,
    DeltaTime,
    Hour12,
    Hour24,
    LinearTime,
    Minute,
    Second,
)

__all__ = [
    # Date
    "Date",
    "DateBuilder",
    "DatePattern",
    "Year",
    "Month",
    "Day",
    "WeekDay",
    "WeekFormat",
    "StyledWeekDay",
    "is_leap_year",
    # Time
    "Hour24",
    "Hour12",
    "Minute",
    "Second",
    "DayPart",
    "ClockReading",
    "LinearTime",
    "DeltaTime",
]
