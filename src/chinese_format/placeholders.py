"""
Заполнители — обёртки, меняющие запись опускаемых значений

- LingPlaceholder: опускаемая запись → 零 (например, 零分 в составной записи)
- EmptyPlaceholder: опускаемая запись → "" (поле даты, которое нужно скрыть)
- LeftPadder: дополнение записи слева до минимальной ширины
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.protocol import to_chinese
from chinese_format.sequence import Fragment, LogogramSequence


class Placeholder(BaseModel):
    """
    Базовая обёртка: если запись значения опускаемая, она заменяется
    одним фрагментом replacement (тоже опускаемым).
    Неопускаемая запись возвращается без изменений.
    """

    replacement: ClassVar[str] = ""

    value: Any

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        sequence = to_chinese(self.value, context)
        if not sequence.is_omissible():
            return sequence
        return LogogramSequence.of(Fragment(logograms=self.replacement, omissible=True))


class LingPlaceholder(Placeholder):
    replacement: ClassVar[str] = "零"


class EmptyPlaceholder(Placeholder):
    replacement: ClassVar[str] = ""


class LeftPadder(BaseModel):
    """
    Дополнение слева: LeftPadder(5, "零", 2) → 零五.

    Ширина считается в логограммах. Опускаемость берётся от исходной записи.
    """

    source: Any
    logogram: str = Field(..., min_length=1, max_length=1)
    min_width: int = Field(..., ge=0)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __init__(self, source: Any, logogram: str, min_width: int, **data: Any) -> None:
        super().__init__(source=source, logogram=logogram, min_width=min_width, **data)

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        collected = to_chinese(self.source, context).collect()
        padding = self.logogram * max(self.min_width - len(collected.logograms), 0)
        return LogogramSequence.of(
            Fragment(logograms=padding + collected.logograms, omissible=collected.omissible)
        )
