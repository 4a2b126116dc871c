"""
Ошибки конструирования значений

Все ошибки возникают ТОЛЬКО при построении значения (конструктор, builder,
фабрика). Конверсия в китайский текст (to_chinese) ошибок не порождает:
любое значение, дошедшее до конверсии, уже валидно.

Иерархия:
- ChineseFormatError (ValueError) — базовый класс
  - ZeroDenominator
  - ScaleOutOfRange / DimesOutOfRange / CentsOutOfRange
  - MonthOutOfRange / DayOutOfRange / WeekDayOutOfRange
  - HourOutOfRange / MinuteOutOfRange / SecondOutOfRange
  - InvalidDate / InvalidDatePattern
  - InvalidDigit
"""

from typing import Optional


class ChineseFormatError(ValueError):
    """Базовая ошибка: значение не может быть построено."""

    pass


class ZeroDenominator(ChineseFormatError):
    """Знаменатель дроби равен нулю."""

    def __init__(self) -> None:
        super().__init__("Zero passed as denominator")


class ScaleOutOfRange(ChineseFormatError):
    """
    Количество для шкалы меры вне допустимого диапазона.

    Для всех шкал, кроме первой, допустимо 0 <= value < limit,
    где limit = divisor предыдущей шкалы / divisor текущей.
    """

    def __init__(self, scale: str, value: int, limit: Optional[int] = None) -> None:
        self.scale = scale
        self.value = value
        self.limit = limit
        super().__init__(f"{scale} out of range: {value}")


class DimesOutOfRange(ScaleOutOfRange):
    """角 (毛) вне диапазона 0..9."""

    def __init__(self, value: int) -> None:
        super().__init__("Dimes", value, 10)


class CentsOutOfRange(ScaleOutOfRange):
    """分 вне диапазона 0..9."""

    def __init__(self, value: int) -> None:
        super().__init__("Cents", value, 10)


class _FieldOutOfRange(ChineseFormatError):
    label = ""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"{self.label} out of range: {value}")


class MonthOutOfRange(_FieldOutOfRange):
    label = "Month"


class DayOutOfRange(_FieldOutOfRange):
    label = "Day"


class WeekDayOutOfRange(_FieldOutOfRange):
    label = "Week day"


class HourOutOfRange(_FieldOutOfRange):
    label = "Hour"


class MinuteOutOfRange(_FieldOutOfRange):
    label = "Minute"


class SecondOutOfRange(_FieldOutOfRange):
    label = "Second"


class InvalidDigit(ChineseFormatError):
    """Элемент последовательности цифр не является цифрой 0..9."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid digit: {value!r}")


class InvalidDatePattern(ChineseFormatError):
    """
    Недопустимая комбинация полей даты.

    pattern — строка флагов в порядке y, m, d, w (например, 'yd').
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid date pattern: {pattern}")


class InvalidDate(ChineseFormatError):
    """Дата не существует в григорианском календаре (например, 2023-2-29)."""

    def __init__(self, month: int, day: int, year: Optional[int] = None) -> None:
        self.year = year
        self.month = month
        self.day = day
        if year is None:
            message = f"Invalid date: {month}-{day}"
        else:
            message = f"Invalid date: {year}-{month}-{day}"
        super().__init__(message)

