"""
Context — стилистическая конфигурация конверсии

Один неизменяемый экземпляр передаётся без изменений через всё дерево
вызовов to_chinese. Изменение контекста в процессе конверсии невозможно
(frozen=True), поэтому один экземпляр безопасно разделять между потоками.
"""

from typing import Final, TypeVar

from pydantic import BaseModel, Field

from chinese_format.numerals import NumeralTable, Variant, numeral_table


T = TypeVar("T")


class Context(BaseModel):
    """
    Параметры стиля записи.

    variant: упрощённая или традиционная письменность
    financial_numerals: финансовые (защищённые от подделки) цифры — 壹贰叁
    show_positive_sign: писать 正 перед положительными числами
    """

    variant: Variant = Field(default=Variant.SIMPLIFIED, description="Вариант письменности")
    financial_numerals: bool = Field(default=False, description="Финансовый набор цифр")
    show_positive_sign: bool = Field(default=False, description="Префикс 正 для положительных")

    model_config = {"frozen": True}

    @property
    def numerals(self) -> NumeralTable:
        """Таблица цифр, соответствующая контексту."""
        return numeral_table(self.variant, self.financial_numerals)

    @property
    def traditional(self) -> bool:
        return self.variant is Variant.TRADITIONAL

    def pick(self, simplified: T, traditional: T) -> T:
        """Выбор значения по варианту письменности."""
        return traditional if self.traditional else simplified


DEFAULT_CONTEXT: Final[Context] = Context()

TRADITIONAL_CONTEXT: Final[Context] = Context(variant=Variant.TRADITIONAL)
