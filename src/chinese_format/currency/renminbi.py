"""
Renminbi — сумма в юанях

Сумма хранится в младших единицах (分) и раскладывается мерой
юань (100) / цзяо (10) / фэнь (1). Внутренний пропуск цзяо пишется 零:
105 → 一元零五分.

Стили:
- EVERYDAY_FORMAL: 元 / 角 / 分, счётная двойка (两元)
- EVERYDAY_INFORMAL: 块 / 毛 / 分
- FINANCIAL: финансовые цифры, 元 / 角 / 分 и завершающее 整
"""

import logging
from enum import Enum
from typing import Dict, Final, Type

from pydantic import BaseModel, Field

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.errors import CentsOutOfRange, DimesOutOfRange
from chinese_format.measure import CompoundMeasure, Quantity, Scale, ZeroPolicy, define_measure
from chinese_format.sequence import Fragment, LogogramSequence


logger = logging.getLogger(__name__)

FINANCIAL_TERMINATOR: Final[str] = "整"

MINOR_UNITS_PER_YUAN: Final[int] = 100
MINOR_UNITS_PER_DIME: Final[int] = 10


class CurrencyStyle(str, Enum):
    """Стиль записи суммы."""

    EVERYDAY_FORMAL = "everyday_formal"
    EVERYDAY_INFORMAL = "everyday_informal"
    FINANCIAL = "financial"


def _scales(yuan: str, dime: str) -> list:
    return [
        Scale(name="yuan", divisor=MINOR_UNITS_PER_YUAN, unit=yuan, policy=ZeroPolicy.OMIT),
        Scale(name="jiao", divisor=MINOR_UNITS_PER_DIME, unit=dime, policy=ZeroPolicy.PLACEHOLDER),
        Scale(name="fen", divisor=1, unit="分", policy=ZeroPolicy.OMIT),
    ]


EverydayFormalAmount = define_measure(
    "EverydayFormalAmount", _scales("元", "角"), module=__name__
)
EverydayInformalAmount = define_measure(
    "EverydayInformalAmount", _scales("块", "毛"), module=__name__
)
FinancialAmount = define_measure(
    "FinancialAmount", _scales("元", "角"), quantity=Quantity.FINANCIAL, module=__name__
)

STYLE_MEASURES: Final[Dict[CurrencyStyle, Type[CompoundMeasure]]] = {
    CurrencyStyle.EVERYDAY_FORMAL: EverydayFormalAmount,
    CurrencyStyle.EVERYDAY_INFORMAL: EverydayInformalAmount,
    CurrencyStyle.FINANCIAL: FinancialAmount,
}


# =============================================================================
# CURRENCY VALUE
# =============================================================================


class RenminbiCurrency(BaseModel):
    """
    Сумма в юанях.

    Создание: RenminbiCurrencyBuilder или from_minor_units().
    Нулевая сумма: 零元 (零元整 в финансовом стиле).
    """

    minor_units: int = Field(..., ge=0, description="Сумма в фэнях")
    style: CurrencyStyle = CurrencyStyle.EVERYDAY_FORMAL

    model_config = {"frozen": True}

    @classmethod
    def from_minor_units(
        cls, minor_units: int, style: CurrencyStyle = CurrencyStyle.EVERYDAY_FORMAL
    ) -> "RenminbiCurrency":
        return cls(minor_units=minor_units, style=style)

    @property
    def amount(self) -> CompoundMeasure:
        return STYLE_MEASURES[self.style](self.minor_units)

    @property
    def yuan(self) -> int:
        return self.minor_units // MINOR_UNITS_PER_YUAN

    @property
    def dimes(self) -> int:
        return self.minor_units // MINOR_UNITS_PER_DIME % 10

    @property
    def cents(self) -> int:
        return self.minor_units % MINOR_UNITS_PER_DIME

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        result = self.amount.to_chinese(context)
        if self.style is CurrencyStyle.FINANCIAL:
            result.push(Fragment(logograms=FINANCIAL_TERMINATOR))
        return result


class RenminbiCurrencyBuilder:
    """
    Пошаговое построение суммы.

    Пример:
        RenminbiCurrencyBuilder().with_yuan(7).with_dimes(8).build() → 七元八角
    """

    def __init__(self) -> None:
        self._yuan = 0
        self._dimes = 0
        self._cents = 0
        self._style = CurrencyStyle.EVERYDAY_FORMAL

    def with_yuan(self, yuan: int) -> "RenminbiCurrencyBuilder":
        self._yuan = yuan
        return self

    def with_dimes(self, dimes: int) -> "RenminbiCurrencyBuilder":
        self._dimes = dimes
        return self

    def with_cents(self, cents: int) -> "RenminbiCurrencyBuilder":
        self._cents = cents
        return self

    def with_style(self, style: CurrencyStyle) -> "RenminbiCurrencyBuilder":
        self._style = style
        return self

    def build(self) -> RenminbiCurrency:
        """
        Raises:
            DimesOutOfRange: Если цзяо вне 0..9
            CentsOutOfRange: Если фэни вне 0..9
            pydantic.ValidationError: Если юани отрицательные
        """
        if not 0 <= self._dimes <= 9:
            logger.debug("Rejected renminbi amount: dimes=%s", self._dimes)
            raise DimesOutOfRange(self._dimes)
        if not 0 <= self._cents <= 9:
            logger.debug("Rejected renminbi amount: cents=%s", self._cents)
            raise CentsOutOfRange(self._cents)

        minor_units = (
            self._yuan * MINOR_UNITS_PER_YUAN + self._dimes * MINOR_UNITS_PER_DIME + self._cents
        )
        return RenminbiCurrency(minor_units=minor_units, style=self._style)

    def __repr__(self) -> str:
        return (
            f"RenminbiCurrencyBuilder(yuan={self._yuan}, dimes={self._dimes}, "
            f"cents={self._cents}, style={self._style.value})"
        )

