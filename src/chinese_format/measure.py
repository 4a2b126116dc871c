"""
Measure — декларативные меры со шкалами

Мера описывается ДАННЫМИ: упорядоченным списком шкал
(имя, делитель, единица, политика нуля). Один интерпретатор
(MeasureDefinition.render) раскладывает величину по шкалам и строит запись;
define_measure() создаёт по определению готовый тип значения с конверсией,
фабриками и аксессорами шкал.

Правило нулевого разрыва:
- нулевая шкала с политикой PLACEHOLDER между двумя выводимыми членами
  даёт ОДИН 零 (серия нулевых шкал подряд тоже даёт один 零)
- ведущие и хвостовые нули не пишутся (кроме политики ALWAYS)
- нулевая величина целиком → один нулевой член 零<единица>, опускаемый

Пример (юань/цзяо/фэнь): 105 → 一元零五分, 15 → 一角五分
"""

import logging
import types
from enum import Enum
from functools import total_ordering
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from chinese_format.context import DEFAULT_CONTEXT, Context
from chinese_format.contracts import validate_measure_definition
from chinese_format.errors import ScaleOutOfRange
from chinese_format.numbers import Count, DigitSequence, Financial
from chinese_format.protocol import Variants, to_chinese
from chinese_format.sequence import Fragment, LogogramSequence


logger = logging.getLogger(__name__)

# Имена, занятые базовой моделью меры
RESERVED_SCALE_NAMES = frozenset(
    {"definition", "magnitude", "parts", "to_chinese", "from_parts", "from_magnitude"}
)


# =============================================================================
# ENUMS
# =============================================================================


class ZeroPolicy(str, Enum):
    """Поведение шкалы с нулевым количеством."""

    OMIT = "omit"  # молча опускается
    PLACEHOLDER = "placeholder"  # внутренний ноль → один 零
    ALWAYS = "always"  # пишется 零<единица> в любой позиции


class Quantity(str, Enum):
    """Запись количества при единице."""

    COUNT = "count"  # 两 для 2
    INTEGER = "integer"  # обычное число
    FINANCIAL = "financial"  # 壹贰叁
    DIGITS = "digits"  # поцифровая запись: 二零二四


def render_quantity(quantity: Quantity, value: int, context: Context) -> LogogramSequence:
    if quantity is Quantity.COUNT:
        return Count(value).to_chinese(context)
    if quantity is Quantity.FINANCIAL:
        return Financial(value).to_chinese(context)
    if quantity is Quantity.DIGITS:
        return DigitSequence.from_int(value).to_chinese(context)
    return to_chinese(value, context)


# =============================================================================
# SCALE / DEFINITION
# =============================================================================


class Scale(BaseModel):
    """
    Одна шкала меры.

    divisor: сколько единиц величины в одной единице шкалы
    unit: логограмма единицы (строка или пара Variants)
    quantity: переопределение записи количества для этой шкалы
    """

    name: str = Field(..., pattern=r"^[a-z_][a-z0-9_]*$")
    divisor: int = Field(..., gt=0)
    unit: Union[str, Variants]
    policy: ZeroPolicy = ZeroPolicy.OMIT
    quantity: Optional[Quantity] = None

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if v in RESERVED_SCALE_NAMES or v.startswith("model_"):
            raise ValueError(f"Scale name '{v}' is reserved")
        return v

    def unit_text(self, context: Context) -> str:
        if isinstance(self.unit, Variants):
            return context.pick(self.unit.simplified, self.unit.traditional)
        return self.unit


class MeasureDefinition(BaseModel):
    """
    Определение меры: упорядоченные шкалы от старшей к младшей.

    Инварианты:
    - делители строго убывают, каждый делится на следующий
    - последний делитель равен 1 (разложение исчерпывающее)
    - имена шкал уникальны
    """

    name: str = Field(..., min_length=1)
    scales: Tuple[Scale, ...] = Field(..., min_length=1)
    quantity: Quantity = Quantity.COUNT
    zero_scale: Optional[str] = Field(default=None, description="Шкала нулевого члена")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_scales(self) -> "MeasureDefinition":
        names = [scale.name for scale in self.scales]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate scale names in {self.name}: {names}")

        for higher, lower in zip(self.scales, self.scales[1:]):
            if higher.divisor <= lower.divisor:
                raise ValueError(f"Divisors must strictly decrease: {higher.name}, {lower.name}")
            if higher.divisor % lower.divisor:
                raise ValueError(f"Divisor of {higher.name} is not a multiple of {lower.name}")

        if self.scales[-1].divisor != 1:
            raise ValueError(f"Last scale of {self.name} must have divisor 1")

        if self.zero_scale is not None and self.zero_scale not in names:
            raise ValueError(f"Unknown zero scale: {self.zero_scale}")
        return self

    @classmethod
    def from_contract(cls, data: Mapping[str, Any]) -> "MeasureDefinition":
        """
        Определение из JSON-подобного словаря.

        Raises:
            jsonschema.ValidationError: Если словарь не соответствует контракту
            pydantic.ValidationError: Если шкалы нарушают инварианты
        """
        validate_measure_definition(dict(data))
        return cls.model_validate(data)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(scale.name for scale in self.scales)

    @property
    def zero_term_scale(self) -> Scale:
        if self.zero_scale is None:
            return self.scales[0]
        return next(scale for scale in self.scales if scale.name == self.zero_scale)

    def limit(self, index: int) -> Optional[int]:
        """Верхняя граница (не включительно) количества шкалы; у первой её нет."""
        if index == 0:
            return None
        return self.scales[index - 1].divisor // self.scales[index].divisor

    def decompose(self, magnitude: int) -> Tuple[int, ...]:
        quantities = []
        for scale in self.scales:
            quantity, magnitude = divmod(magnitude, scale.divisor)
            quantities.append(quantity)
        return tuple(quantities)

    def compose(self, quantities: Mapping[str, int]) -> int:
        """
        Величина из количеств по шкалам (отсутствующие = 0).

        Raises:
            ScaleOutOfRange: Если количество отрицательное или не меньше границы
            TypeError: Если указана неизвестная шкала
        """
        unknown = set(quantities) - set(self.names)
        if unknown:
            raise TypeError(f"Unknown scales for {self.name}: {sorted(unknown)}")

        magnitude = 0
        for index, scale in enumerate(self.scales):
            value = quantities.get(scale.name, 0)
            limit = self.limit(index)
            if value < 0 or (limit is not None and value >= limit):
                logger.debug("Rejected %s=%s for measure %s", scale.name, value, self.name)
                raise ScaleOutOfRange(scale.name, value, limit)
            magnitude += value * scale.divisor
        return magnitude

    def render(self, magnitude: int, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        quantities = self.decompose(magnitude)
        zero = context.numerals.zero

        if not any(quantities):
            unit = self.zero_term_scale.unit_text(context)
            return LogogramSequence.of(Fragment(logograms=zero + unit, omissible=True))

        emitted = [
            index
            for index, (scale, quantity) in enumerate(zip(self.scales, quantities))
            if quantity or scale.policy is ZeroPolicy.ALWAYS
        ]

        result = LogogramSequence.empty()
        gap = False
        for index in range(emitted[0], emitted[-1] + 1):
            scale, quantity = self.scales[index], quantities[index]
            if index not in emitted:
                gap = gap or scale.policy is ZeroPolicy.PLACEHOLDER
                continue

            if gap:
                result.push(Fragment(logograms=zero, omissible=True))
                gap = False
            result.push(self._term(scale, quantity, context))
        return result

    def _term(self, scale: Scale, quantity: int, context: Context) -> Fragment:
        numeral = render_quantity(scale.quantity or self.quantity, quantity, context).collect()
        return Fragment(
            logograms=numeral.logograms + scale.unit_text(context),
            omissible=numeral.omissible,
        )


# =============================================================================
# MEASURE VALUES
# =============================================================================


@total_ordering
class CompoundMeasure(BaseModel):
    """
    Базовый тип значения меры.

    Хранит одну неотрицательную величину в младших единицах;
    разложение по шкалам вычисляется по определению класса.
    """

    definition: ClassVar[MeasureDefinition]

    magnitude: int = Field(..., ge=0)

    model_config = {"frozen": True}

    def __init__(self, magnitude: int, **data: Any) -> None:
        super().__init__(magnitude=magnitude, **data)

    @classmethod
    def from_magnitude(cls, magnitude: int):
        return cls(magnitude)

    @classmethod
    def from_parts(cls, **quantities: int):
        """
        Raises:
            ScaleOutOfRange: Если количество шкалы вне диапазона
        """
        return cls(cls.definition.compose(quantities))

    def parts(self) -> Dict[str, int]:
        return dict(zip(self.definition.names, self.definition.decompose(self.magnitude)))

    def __lt__(self, other: "CompoundMeasure") -> bool:
        if not isinstance(other, CompoundMeasure) or other.definition != self.definition:
            return NotImplemented
        return self.magnitude < other.magnitude

    def to_chinese(self, context: Context = DEFAULT_CONTEXT) -> LogogramSequence:
        return self.definition.render(self.magnitude, context)


def _scale_accessor(index: int) -> property:
    return property(lambda self: self.definition.decompose(self.magnitude)[index])


def measure_class(
    definition: MeasureDefinition,
    base: Type[CompoundMeasure] = CompoundMeasure,
    module: str = __name__,
) -> Type[CompoundMeasure]:
    """Тип значения по готовому определению (например, из from_contract)."""

    namespace: Dict[str, Any] = {
        "__module__": module,
        "__qualname__": definition.name,
        "definition": definition,
    }
    for index, name in enumerate(definition.names):
        namespace[name] = _scale_accessor(index)

    cls = types.new_class(definition.name, (base,), {}, lambda ns: ns.update(namespace))
    logger.debug("Defined measure %s with scales %s", definition.name, definition.names)
    return cls


def define_measure(
    name: str,
    scales: Iterable[Scale],
    quantity: Quantity = Quantity.COUNT,
    zero_scale: Optional[str] = None,
    base: Type[CompoundMeasure] = CompoundMeasure,
    module: str = __name__,
) -> Type[CompoundMeasure]:
    """
    Создание типа меры из списка шкал.

    Args:
        name: Имя создаваемого класса
        scales: Шкалы от старшей к младшей
        quantity: Запись количеств по умолчанию
        zero_scale: Шкала для записи нулевой величины (по умолчанию первая)
        base: Базовый класс (подкласс CompoundMeasure)
        module: Модуль создаваемого класса (передаётся как __name__ вызывающего)

    Returns:
        Новый неизменяемый тип значения с to_chinese, from_parts,
        from_magnitude и аксессором для каждой шкалы

    Raises:
        pydantic.ValidationError: Если шкалы нарушают инварианты
    """
    definition = MeasureDefinition(
        name=name, scales=tuple(scales), quantity=quantity, zero_scale=zero_scale
    )
    return measure_class(definition, base=base, module=module)


def unit_measure(
    name: str,
    unit: Union[str, Variants],
    quantity: Quantity = Quantity.COUNT,
    module: str = __name__,
) -> Type[CompoundMeasure]:
    """Мера с одной единицей: количество + единица, аксессор value."""
    return define_measure(
        name,
        [Scale(name="value", divisor=1, unit=unit, policy=ZeroPolicy.ALWAYS)],
        quantity=quantity,
        module=module,
    )
