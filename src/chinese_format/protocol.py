"""
Conversion Protocol — единый протокол конверсии в китайский текст

Любой тип, реализующий метод to_chinese(context) -> LogogramSequence,
удовлетворяет протоколу ChineseFormat. Для встроенных типов Python
(str, None, tuple, list; int регистрируется в chinese_format.numbers)
конверсия выполняется через диспетчер to_chinese().

Композитные конверсии (tuple, list, Optional) определены ТОЛЬКО через
протокол на элементах — без частных случаев по типу элемента.
"""

from functools import singledispatch
from typing import Any, Iterable, Protocol, runtime_checkable

from pydantic import BaseModel

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.sequence import PLACEHOLDER, Fragment, LogogramSequence


@runtime_checkable
class ChineseFormat(Protocol):
    """Возможность: представить значение последовательностью логограмм."""

    def to_chinese(self, context: Context) -> LogogramSequence: ...


# =============================================================================
# DISPATCH
# =============================================================================


def to_chinese(value: Any, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
    """
    Конверсия произвольного значения.

    Args:
        value: Значение, реализующее ChineseFormat, или встроенный тип
        context: Контекст, передаваемый без изменений во все вложенные вызовы

    Returns:
        Новая LogogramSequence, принадлежащая вызывающему

    Raises:
        TypeError: Если для типа нет конверсии
    """
    if not isinstance(value, type) and isinstance(value, ChineseFormat):
        return value.to_chinese(context)
    return _convert(value, context)


def chinese_text(value: Any, context: Context = DEFAULT_CONTEXT) -> str:
    """Конверсия сразу в строку."""
    return to_chinese(value, context).to_text()


def compose(context: Context, values: Iterable[Any], separator: str = "") -> LogogramSequence:
    """Конкатенация конверсий значений в заданном порядке (по умолчанию без разделителя)."""
    result = LogogramSequence.empty()
    for index, value in enumerate(values):
        if index and separator:
            result.push(Fragment(logograms=separator))
        result = result.concat(to_chinese(value, context))
    return result


@singledispatch
def _convert(value: Any, context: Context) -> LogogramSequence:
    raise TypeError(f"No Chinese conversion for {type(value).__name__}")


def register(cls: type):
    """Регистрация конверсии для встроенного/внешнего типа."""
    return _convert.register(cls)


@_convert.register(str)
def _convert_str(value: str, context: Context) -> LogogramSequence:
    # Строка передаётся как есть; опускаемой считается только пустая
    return LogogramSequence.of(Fragment.from_text(value))


@_convert.register(type(None))
def _convert_none(value: None, context: Context) -> LogogramSequence:
    # Не пустая последовательность: позиция заполнителя значима (даты)
    return LogogramSequence.of(PLACEHOLDER)


@_convert.register(tuple)
@_convert.register(list)
def _convert_items(value: Iterable[Any], context: Context) -> LogogramSequence:
    return compose(context, value)


# =============================================================================
# VARIANTS
# =============================================================================


class Variants(BaseModel):
    """
    Пара написаний: упрощённое и традиционное.

    Пример:
        Variants("礼拜", "禮拜") → 礼拜 / 禮拜 в зависимости от контекста
    """

    simplified: str
    traditional: str

    model_config = {"frozen": True}

    def __init__(self, simplified: str, traditional: str, **data: Any) -> None:
        super().__init__(simplified=simplified, traditional=traditional, **data)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        return LogogramSequence.of(
            Fragment.from_text(context.pick(self.simplified, self.traditional))
        )
