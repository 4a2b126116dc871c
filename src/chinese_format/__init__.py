"""
chinese-format — запись чисел, дат, времени и сумм китайскими логограммами.

Каждое значение конвертируется через to_chinese(value, context) в
LogogramSequence; итоговый текст — chinese_text(value, context).
"""

from chinese_format.context import DEFAULT_CONTEXT, TRADITIONAL_CONTEXT, Context
from chinese_format.errors import (
    CentsOutOfRange,
    ChineseFormatError,
    DayOutOfRange,
    DimesOutOfRange,
    HourOutOfRange,
    InvalidDate,
    InvalidDatePattern,
    InvalidDigit,
    MinuteOutOfRange,
    MonthOutOfRange,
    ScaleOutOfRange,
    SecondOutOfRange,
    WeekDayOutOfRange,
    ZeroDenominator,
)
from chinese_format.measure import (
    CompoundMeasure,
    MeasureDefinition,
    Quantity,
    Scale,
    ZeroPolicy,
    define_measure,
    measure_class,
    unit_measure,
)
from chinese_format.numbers import Count, Decimal, DigitSequence, Financial, Fraction, Sign
from chinese_format.numerals import NumeralTable, Variant, numeral_table
from chinese_format.placeholders import EmptyPlaceholder, LeftPadder, LingPlaceholder
from chinese_format.protocol import ChineseFormat, Variants, chinese_text, compose, to_chinese
from chinese_format.sequence import PLACEHOLDER, Fragment, LogogramSequence

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Fragment",
    "PLACEHOLDER",
    "LogogramSequence",
    "ChineseFormat",
    "to_chinese",
    "chinese_text",
    "compose",
    "Variants",
    # Context
    "Context",
    "DEFAULT_CONTEXT",
    "TRADITIONAL_CONTEXT",
    "Variant",
    "NumeralTable",
    "numeral_table",
    # Numbers
    "Sign",
    "Count",
    "Financial",
    "Fraction",
    "DigitSequence",
    "Decimal",
    # Placeholders
    "LingPlaceholder",
    "EmptyPlaceholder",
    "LeftPadder",
    # Measures
    "ZeroPolicy",
    "Quantity",
    "Scale",
    "MeasureDefinition",
    "CompoundMeasure",
    "define_measure",
    "measure_class",
    "unit_measure",
    # Errors
    "ChineseFormatError",
    "ZeroDenominator",
    "ScaleOutOfRange",
    "DimesOutOfRange",
    "CentsOutOfRange",
    "MonthOutOfRange",
    "DayOutOfRange",
    "WeekDayOutOfRange",
    "HourOutOfRange",
    "MinuteOutOfRange",
    "SecondOutOfRange",
    "InvalidDigit",
    "InvalidDate",
    "InvalidDatePattern",
]
