"""
Числовые типы и их конверсия

- int: знак + запись с разрядами (регистрируется в диспетчере to_chinese)
- Sign: префикс знака (负 / 正 / ничего)
- Count: счётное количество (2 → 两)
- Financial: финансовая запись, защищённая от подделки (2 → 贰)
- Fraction: дробь, знаменатель ПЕРВЫМ: 四分之三
- DigitSequence: поцифровая запись без разрядов (телефоны, коды, годы)
- Decimal: целая часть с разрядами + 点 + поцифровая дробная часть

Инварианты конструирования проверяются при создании значения;
to_chinese для построенного значения ошибок не порождает.
"""

import logging
from enum import Enum
from functools import total_ordering
from typing import Annotated, Any, Tuple

from pydantic import BaseModel, Field

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.errors import InvalidDigit, ZeroDenominator
from chinese_format.numerals import numeral_table
from chinese_format.protocol import register, to_chinese
from chinese_format.sequence import Fragment, LogogramSequence


logger = logging.getLogger(__name__)

FRACTION_CONNECTIVE = "分之"


# =============================================================================
# SIGN
# =============================================================================


class Sign(str, Enum):
    """
    Знак числа.

    Ноль считается положительным: префикс не пишется.
    Положительный знак (正) пишется только при context.show_positive_sign.
    """

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"

    @classmethod
    def of(cls, value: int) -> "Sign":
        if value < 0:
            return cls.NEGATIVE
        if value == 0:
            return cls.ZERO
        return cls.POSITIVE

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        if self is Sign.NEGATIVE:
            return LogogramSequence.of(Fragment(logograms=context.numerals.minus))
        if self is Sign.POSITIVE and context.show_positive_sign:
            return LogogramSequence.of(Fragment(logograms=context.numerals.plus))
        return LogogramSequence.empty()


@register(int)
def _convert_int(value: int, context: Context) -> LogogramSequence:
    magnitude = Fragment(logograms=context.numerals.render(abs(value)), omissible=value == 0)
    return Sign.of(value).to_chinese(context).concat(LogogramSequence.of(magnitude))


@register(bool)
def _convert_bool(value: bool, context: Context) -> LogogramSequence:
    raise TypeError("bool is not a number: convert int(value) explicitly")


# =============================================================================
# COUNT / FINANCIAL
# =============================================================================


class Count(BaseModel):
    """
    Результат счёта: неотрицательное целое.

    Пишется как обычное число, КРОМЕ значения 2: 两 (兩).
    В финансовом контексте 两 не используется.
    """

    value: int = Field(..., ge=0)

    model_config = {"frozen": True}

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        if self.value == 2:
            return LogogramSequence.of(Fragment(logograms=context.numerals.two))
        return to_chinese(self.value, context)


class Financial(BaseModel):
    """
    Финансовое число: всегда пишется финансовыми цифрами.

    Пример: 1000 → 壹仟, 10 → 拾
    """

    value: int = Field(..., ge=0)

    model_config = {"frozen": True}

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        table = numeral_table(context.variant, financial=True)
        return LogogramSequence.of(
            Fragment(logograms=table.render(self.value), omissible=self.value == 0)
        )


# =============================================================================
# FRACTION
# =============================================================================


class Fraction(BaseModel):
    """
    Дробь.

    В китайском знаменатель называется первым: 八分之三 = 3/8.
    Этот порядок — правило языка, а не деталь реализации.

    Создание: Fraction.try_new(denominator, numerator) — знаменатель
    передаётся ПЕРВЫМ, как и читается.
    """

    denominator: int = Field(..., gt=0)
    numerator: int

    model_config = {"frozen": True}

    @classmethod
    def try_new(cls, denominator: int, numerator: int) -> "Fraction":
        """
        Raises:
            ZeroDenominator: Если знаменатель равен 0
        """
        if denominator == 0:
            logger.debug("Rejected fraction %s/0", numerator)
            raise ZeroDenominator()
        return cls(denominator=denominator, numerator=numerator)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        if self.numerator == 0:
            return LogogramSequence.of(Fragment(logograms=context.numerals.zero, omissible=True))

        return (
            Sign.of(self.numerator)
            .to_chinese(context)
            .concat(to_chinese(self.denominator, context))
            .concat(LogogramSequence.from_text(FRACTION_CONNECTIVE))
            .concat(to_chinese(abs(self.numerator), context))
        )


# =============================================================================
# DIGIT SEQUENCE
# =============================================================================


Digit = Annotated[int, Field(ge=0, le=9)]


class DigitSequence(BaseModel):
    """
    Последовательность десятичных цифр 0..9.

    Каждая цифра пишется отдельно, без разрядов: 2014 → 二零一四.
    Пустая последовательность даёт опускаемую пустую строку.
    """

    digits: Tuple[Digit, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def from_string(cls, text: str) -> "DigitSequence":
        """
        Raises:
            InvalidDigit: Если символ не является цифрой 0..9
        """
        digits = []
        for char in text:
            if char not in "0123456789":
                raise InvalidDigit(char)
            digits.append(int(char))
        return cls(digits=tuple(digits))

    @classmethod
    def from_int(cls, value: int) -> "DigitSequence":
        if value < 0:
            raise InvalidDigit(value)
        return cls.from_string(str(value))

    def is_empty(self) -> bool:
        return not self.digits

    def to_int(self) -> int:
        return int("".join(str(digit) for digit in self.digits)) if self.digits else 0

    def __len__(self) -> int:
        return len(self.digits)

    def __iter__(self):
        return iter(self.digits)

    def __lt__(self, other: "DigitSequence") -> bool:
        return self.digits < other.digits

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self.digits)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        return LogogramSequence.of(Fragment.from_text(context.numerals.render_digits(self.digits)))


# =============================================================================
# DECIMAL
# =============================================================================


@total_ordering
class Decimal(BaseModel):
    """
    Точное десятичное число.

    integer: целая часть со знаком (запись с разрядами)
    fractional: цифры после точки (запись поцифровая, любой длины)

    Пример: Decimal(integer=35, fractional=DigitSequence.from_string("28039"))
        → 三十五点二八零三九
    """

    integer: int
    fractional: DigitSequence = Field(default_factory=DigitSequence)

    model_config = {"frozen": True}

    def _scaled(self, width: int) -> int:
        """Значение, умноженное на 10**width (width не меньше числа дробных цифр)."""
        fraction = str(self.fractional).ljust(width, "0")
        fraction_value = int(fraction) if fraction else 0
        if self.integer < 0:
            fraction_value = -fraction_value
        return self.integer * 10**width + fraction_value

    def __lt__(self, other: "Decimal") -> bool:
        """
        Сравнение по значению: -1.5 < -1.2 < 1.2 < 1.5.

        Дробная часть имеет знак целой; при integer=0 число неотрицательно.
        """
        if not isinstance(other, Decimal):
            return NotImplemented
        width = max(len(self.fractional), len(other.fractional))
        return self._scaled(width) < other._scaled(width)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        integer = to_chinese(self.integer, context)
        if self.fractional.is_empty():
            return integer

        point = LogogramSequence.of(Fragment(logograms=context.numerals.point))
        return integer.concat(point).concat(self.fractional.to_chinese(context))
