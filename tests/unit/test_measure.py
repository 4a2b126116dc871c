"""
Тесты декларативных мер

Проверяет:
1. Правило нулевого разрыва (105 → 零 между членами, 15 → без 零)
2. Закон нулевой величины: 0 → ровно один нулевой член
3. Политики OMIT / PLACEHOLDER / ALWAYS
4. Фабрики from_parts / from_magnitude, аксессоры шкал
5. Проверку инвариантов определения
"""

import pytest
from pydantic import ValidationError

from chinese_format import (
    TRADITIONAL_CONTEXT,
    Fragment,
    LogogramSequence,
    MeasureDefinition,
    Quantity,
    Scale,
    ScaleOutOfRange,
    Variants,
    ZeroPolicy,
    chinese_text,
    define_measure,
    to_chinese,
    unit_measure,
)


Money = define_measure(
    "Money",
    [
        Scale(name="kuai", divisor=100, unit="块"),
        Scale(name="mao", divisor=10, unit="毛", policy=ZeroPolicy.PLACEHOLDER),
        Scale(name="fen", divisor=1, unit="分"),
    ],
    quantity=Quantity.INTEGER,
    module=__name__,
)

Digits = define_measure(
    "Digits",
    [
        Scale(name="thousands", divisor=1000, unit="千", policy=ZeroPolicy.PLACEHOLDER),
        Scale(name="hundreds", divisor=100, unit="百", policy=ZeroPolicy.PLACEHOLDER),
        Scale(name="tens", divisor=10, unit="十", policy=ZeroPolicy.PLACEHOLDER),
        Scale(name="ones", divisor=1, unit="个", policy=ZeroPolicy.PLACEHOLDER),
    ],
    quantity=Quantity.INTEGER,
    zero_scale="ones",
)


class TestZeroGap:
    """Правило нулевого разрыва"""

    def test_interior_zero_gets_placeholder(self) -> None:
        sequence = to_chinese(Money(105))
        assert sequence == LogogramSequence.of(
            Fragment(logograms="一块"),
            Fragment(logograms="零", omissible=True),
            Fragment(logograms="五分"),
        )

    def test_no_placeholder_without_higher_term(self) -> None:
        sequence = to_chinese(Money(15))
        assert sequence.to_text() == "一毛五分"
        assert len(sequence) == 2

    def test_gap_distinguishes_magnitudes(self) -> None:
        """Инвариант: 105 и 15 не должны читаться одинаково"""
        assert chinese_text(Money(105)) != chinese_text(Money(15)).replace("毛", "块")
        assert "零" in chinese_text(Money(105))
        assert "零" not in chinese_text(Money(15))

    def test_run_of_zeros_gives_single_placeholder(self) -> None:
        assert chinese_text(Digits(1005)) == "一千零五个"
        assert chinese_text(Digits(1050)) == "一千零五十"

    def test_trailing_zeros_dropped(self) -> None:
        assert chinese_text(Money(100)) == "一块"
        assert chinese_text(Money(120)) == "一块二毛"

    def test_omit_policy_skips_silently(self) -> None:
        Plain = define_measure(
            "Plain",
            [
                Scale(name="kuai", divisor=100, unit="块"),
                Scale(name="mao", divisor=10, unit="毛"),
                Scale(name="fen", divisor=1, unit="分"),
            ],
            quantity=Quantity.INTEGER,
        )
        assert chinese_text(Plain(105)) == "一块五分"

    def test_always_policy_renders_zero_term(self) -> None:
        Strict = define_measure(
            "Strict",
            [
                Scale(name="kuai", divisor=100, unit="块"),
                Scale(name="mao", divisor=10, unit="毛", policy=ZeroPolicy.ALWAYS),
                Scale(name="fen", divisor=1, unit="分"),
            ],
            quantity=Quantity.INTEGER,
        )
        assert chinese_text(Strict(105)) == "一块零毛五分"
        assert chinese_text(Strict(5)) == "零毛五分"


class TestTotalZero:
    """Закон нулевой величины"""

    def test_default_zero_scale(self) -> None:
        sequence = to_chinese(Money(0))
        assert sequence == LogogramSequence.of(Fragment(logograms="零块", omissible=True))

    def test_designated_zero_scale(self) -> None:
        assert chinese_text(Digits(0)) == "零个"

    def test_never_empty(self) -> None:
        assert not to_chinese(Money(0)).is_empty()


class TestMeasureValues:
    """Фабрики и аксессоры"""

    def test_accessors(self) -> None:
        money = Money(1234)
        assert money.kuai == 12
        assert money.mao == 3
        assert money.fen == 4
        assert money.parts() == {"kuai": 12, "mao": 3, "fen": 4}

    def test_from_parts(self) -> None:
        assert Money.from_parts(kuai=1, fen=5) == Money(105)
        assert Money.from_parts(kuai=250).magnitude == 25000

    def test_from_magnitude(self) -> None:
        assert Money.from_magnitude(42) == Money(42)

    def test_from_parts_out_of_range(self) -> None:
        with pytest.raises(ScaleOutOfRange, match="mao out of range: 10"):
            Money.from_parts(mao=10)

    def test_from_parts_negative(self) -> None:
        with pytest.raises(ScaleOutOfRange):
            Money.from_parts(kuai=-1)

    def test_from_parts_unknown_scale(self) -> None:
        with pytest.raises(TypeError):
            Money.from_parts(jiao=1)

    def test_negative_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Money(-1)

    def test_frozen(self) -> None:
        money = Money(5)
        with pytest.raises(ValidationError):
            money.magnitude = 6

    def test_ordering(self) -> None:
        assert Money(5) < Money(10)
        assert Money(10) >= Money(10)

    def test_generated_class(self) -> None:
        assert Money.__name__ == "Money"
        assert Money.__module__ == __name__
        assert Money.definition.names == ("kuai", "mao", "fen")

    def test_default_module(self) -> None:
        Pieces = define_measure("Pieces", [Scale(name="items", divisor=1, unit="个")])
        assert Pieces.__module__ == "chinese_format.measure"
        assert Pieces.__qualname__ == "Pieces"

    def test_count_quantity(self) -> None:
        Pieces = define_measure(
            "Pieces",
            [Scale(name="boxes", divisor=12, unit="箱"), Scale(name="items", divisor=1, unit="个")],
        )
        assert chinese_text(Pieces(26)) == "两箱两个"

    def test_financial_quantity(self) -> None:
        Amount = define_measure(
            "Amount", [Scale(name="yuan", divisor=1, unit="元")], quantity=Quantity.FINANCIAL
        )
        assert chinese_text(Amount(3)) == "叁元"

    def test_variant_unit(self) -> None:
        Span = define_measure(
            "Span", [Scale(name="cm", divisor=1, unit=Variants("厘米", "釐米"))]
        )
        assert chinese_text(Span(5), TRADITIONAL_CONTEXT) == "五釐米"


class TestUnitMeasure:
    """Меры с одной единицей"""

    def test_value_accessor(self) -> None:
        Cups = unit_measure("Cups", "杯")
        assert Cups(3).value == 3
        assert chinese_text(Cups(3)) == "三杯"

    def test_zero_is_omissible(self) -> None:
        Cups = unit_measure("Cups", "杯")
        sequence = to_chinese(Cups(0))
        assert sequence.to_text() == "零杯"
        assert sequence.is_omissible()

    def test_digits_quantity(self) -> None:
        Years = unit_measure("Years", "年", quantity=Quantity.DIGITS)
        assert chinese_text(Years(2024)) == "二零二四年"


class TestDefinitionValidation:
    """Инварианты определения меры"""

    def test_divisors_must_decrease(self) -> None:
        with pytest.raises(ValidationError):
            MeasureDefinition(
                name="Bad",
                scales=(
                    Scale(name="a", divisor=10, unit="甲"),
                    Scale(name="b", divisor=10, unit="乙"),
                    Scale(name="c", divisor=1, unit="丙"),
                ),
            )

    def test_last_divisor_must_be_one(self) -> None:
        with pytest.raises(ValidationError):
            MeasureDefinition(name="Bad", scales=(Scale(name="a", divisor=10, unit="甲"),))

    def test_divisors_must_divide(self) -> None:
        with pytest.raises(ValidationError):
            MeasureDefinition(
                name="Bad",
                scales=(
                    Scale(name="a", divisor=100, unit="甲"),
                    Scale(name="b", divisor=30, unit="乙"),
                    Scale(name="c", divisor=1, unit="丙"),
                ),
            )

    def test_duplicate_names(self) -> None:
        with pytest.raises(ValidationError):
            MeasureDefinition(
                name="Bad",
                scales=(Scale(name="a", divisor=10, unit="甲"), Scale(name="a", divisor=1, unit="乙")),
            )

    def test_reserved_name(self) -> None:
        with pytest.raises(ValidationError):
            Scale(name="magnitude", divisor=1, unit="甲")

    def test_unknown_zero_scale(self) -> None:
        with pytest.raises(ValidationError):
            MeasureDefinition(
                name="Bad", scales=(Scale(name="a", divisor=1, unit="甲"),), zero_scale="b"
            )

    def test_empty_scales(self) -> None:
        with pytest.raises(ValidationError):
            MeasureDefinition(name="Bad", scales=())

    def test_define_measure_validates(self) -> None:
        with pytest.raises(ValidationError):
            define_measure("Bad", [Scale(name="a", divisor=2, unit="甲")])
