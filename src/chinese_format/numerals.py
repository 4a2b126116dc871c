"""
Numerals — таблицы китайских цифр и разрядов

Неизменяемые таблицы цифр/разрядов строятся ОДИН раз при импорте модуля
(вариант письменности × финансовый регистр) и доступны только на чтение
через numeral_table(). Никакого изменяемого глобального состояния.

Алгоритм записи целых чисел — группировка по 10 000 (万-система):
- внутренний разрыв из нулей любой длины обозначается одним 零
- хвостовые нули не пишутся
- ведущая 一 опускается, если первая секция числа 10..19 (十七, 十五万)
- числа выше старшего разряда (载) записываются рекурсивно (一万载)
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Tuple

from pydantic import BaseModel, Field


# =============================================================================
# ВАРИАНТ ПИСЬМЕННОСТИ
# =============================================================================


class Variant(str, Enum):
    """Два основных варианта китайской письменности."""

    SIMPLIFIED = "simplified"
    TRADITIONAL = "traditional"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

COMMON_DIGITS: Final[str] = "零一二三四五六七八九"
FINANCIAL_DIGITS_SIMPLIFIED: Final[str] = "零壹贰叁肆伍陆柒捌玖"
FINANCIAL_DIGITS_TRADITIONAL: Final[str] = "零壹貳參肆伍陸柒捌玖"

COMMON_PLACES: Final[str] = "十百千"
FINANCIAL_PLACES: Final[str] = "拾佰仟"

# 万 = 10^4, 亿 = 10^8, ... 载 = 10^44
LARGE_UNITS_SIMPLIFIED: Final[str] = "万亿兆京垓秭穰沟涧正载"
LARGE_UNITS_TRADITIONAL: Final[str] = "萬億兆京垓秭穰溝澗正載"

MINUS: Final[Tuple[str, str]] = ("负", "負")
PLUS: Final[str] = "正"
POINT: Final[Tuple[str, str]] = ("点", "點")
COUNT_TWO: Final[Tuple[str, str]] = ("两", "兩")

GROUP_BASE: Final[int] = 10_000


# =============================================================================
# NUMERAL TABLE
# =============================================================================


class NumeralTable(BaseModel):
    """
    Неизменяемая таблица цифр для одного стиля записи.

    digits: 10 цифр от 零 до 九 (или 零..玖 в финансовом регистре)
    places: разряды внутри секции (十百千 / 拾佰仟)
    large_units: разряды секций, начиная с 万
    """

    variant: Variant
    financial: bool
    digits: str = Field(..., min_length=10, max_length=10)
    places: str = Field(..., min_length=3, max_length=3)
    large_units: str = Field(..., min_length=1)
    minus: str = Field(..., min_length=1)
    plus: str = Field(..., min_length=1)
    point: str = Field(..., min_length=1)
    two: str = Field(..., min_length=1, description="Счётная форма двойки (两)")

    model_config = {"frozen": True}

    @property
    def zero(self) -> str:
        return self.digits[0]

    def digit(self, value: int) -> str:
        """Одна цифра 0..9."""
        return self.digits[value]

    def render_digits(self, digits: Iterable[int]) -> str:
        """Поцифровая запись без разрядов: 2014 → 二零一四."""
        return "".join(self.digits[digit] for digit in digits)

    def render(self, value: int) -> str:
        """
        Запись неотрицательного целого числа с разрядами.

        Args:
            value: Число >= 0

        Returns:
            Строка логограмм (0 → 零)

        Raises:
            ValueError: Если число отрицательное (знак обрабатывает Sign)
        """
        if value < 0:
            raise ValueError(f"NumeralTable renders magnitudes only, got {value}")
        if value == 0:
            return self.zero
        return self._render_positive(value, leading=True)

    def _render_positive(self, value: int, leading: bool) -> str:
        top_unit_value = GROUP_BASE ** len(self.large_units)

        if value >= top_unit_value * GROUP_BASE:
            # Выше старшего разряда: множитель при 载 записывается рекурсивно
            high, low = divmod(value, top_unit_value)
            text = self._render_positive(high, leading) + self.large_units[-1]
            if low:
                if low < top_unit_value // 10:
                    text += self.zero
                text += self._render_positive(low, leading=False)
            return text

        groups = []
        while value:
            value, group = divmod(value, GROUP_BASE)
            groups.append(group)

        parts = []
        pending_zero = False
        for index in reversed(range(len(groups))):
            group = groups[index]
            if group == 0:
                pending_zero = pending_zero or bool(parts)
                continue

            if parts and (pending_zero or group < 1000):
                parts.append(self.zero)
            parts.append(self._render_section(group, leading=leading and not parts))
            if index:
                parts.append(self.large_units[index - 1])
            pending_zero = False

        return "".join(parts)

    def _render_section(self, group: int, leading: bool) -> str:
        # group: 1..9999
        digits = (group // 1000, group // 100 % 10, group // 10 % 10, group % 10)

        parts = []
        pending_zero = False
        for position, digit in enumerate(digits):
            place = 3 - position
            if digit == 0:
                pending_zero = pending_zero or bool(parts)
                continue

            if pending_zero:
                parts.append(self.zero)
                pending_zero = False

            # 十七, а не 一十七 — только в самом начале числа
            if not (leading and not parts and place == 1 and digit == 1):
                parts.append(self.digits[digit])
            if place:
                parts.append(self.places[place - 1])

        return "".join(parts)


def _build_table(variant: Variant, financial: bool) -> NumeralTable:
    traditional = variant is Variant.TRADITIONAL
    index = 1 if traditional else 0

    if financial:
        digits = FINANCIAL_DIGITS_TRADITIONAL if traditional else FINANCIAL_DIGITS_SIMPLIFIED
        places = FINANCIAL_PLACES
    else:
        digits = COMMON_DIGITS
        places = COMMON_PLACES

    return NumeralTable(
        variant=variant,
        financial=financial,
        digits=digits,
        places=places,
        large_units=LARGE_UNITS_TRADITIONAL if traditional else LARGE_UNITS_SIMPLIFIED,
        minus=MINUS[index],
        plus=PLUS,
        point=POINT[index],
        # В финансовом регистре двойка всегда 贰/貳
        two=digits[2] if financial else COUNT_TWO[index],
    )


NUMERAL_TABLES: Final[Mapping[Tuple[Variant, bool], NumeralTable]] = MappingProxyType(
    {
        (variant, financial): _build_table(variant, financial)
        for variant in Variant
        for financial in (False, True)
    }
)


def numeral_table(variant: Variant, financial: bool = False) -> NumeralTable:
    """Готовая таблица для варианта письменности и регистра."""
    return NUMERAL_TABLES[(variant, financial)]
