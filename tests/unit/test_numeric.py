"""
Тесты для модуля Numeric Comparator

Проверяет:
1. Сравнение внутри одного типа (собственный порядок)
2. Сравнение между типами через каноническую форму (int, Fraction, Decimal)
3. Отказы на нечисловых записях
4. Точную десятичную запись
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from intervalkit.errors import IncomparableNumbersError, MissingValueError
from intervalkit.numeric import (
    NumberComparator,
    compare_numbers,
    get_number_comparator,
    to_decimal_text,
    to_canonical,
)
from tests.testdata import ComparableNumber, FaultyNumber, IllegalNumber

# =============================================================================
# КАНОНИЧЕСКОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestToCanonical:
    """Тесты to_canonical"""

    def test_int_unchanged(self) -> None:
        """int возвращается как есть"""
        assert to_canonical(-3) == -3
        assert to_canonical(10**50) == 10**50
        assert type(to_canonical(7)) is int

    def test_float_uses_shortest_repr(self) -> None:
        """float → Decimal по кратчайшей записи"""
        assert to_canonical(0.1) == Decimal("0.1")
        assert to_canonical(-2.5) == Decimal("-2.5")
        assert to_canonical(1e-7) == Decimal("1e-7")
        assert type(to_canonical(0.1)) is Decimal

    def test_decimal_unchanged(self) -> None:
        """Decimal возвращается как есть, без раскрытия экспоненты"""
        value = Decimal("1e999999999")
        assert to_canonical(value) is value

    def test_fraction_unchanged(self) -> None:
        """Fraction возвращается как есть"""
        value = Fraction(1, 3)
        assert to_canonical(value) is value

    def test_custom_number_via_text(self) -> None:
        """Прочие типы → Decimal(str(value))"""
        assert to_canonical(ComparableNumber("-0.75")) == Decimal("-0.75")

    def test_non_numeric_text_raises(self) -> None:
        """Нечисловая запись → IncomparableNumbersError"""
        with pytest.raises(IncomparableNumbersError, match="Not a number value"):
            to_canonical(IllegalNumber("0"))

    def test_non_finite_text_raises(self) -> None:
        """Запись NaN у пользовательского типа → IncomparableNumbersError"""
        with pytest.raises(IncomparableNumbersError):
            to_canonical(ComparableNumber("NaN"))

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), Decimal("NaN")])
    def test_non_finite_raises(self, value) -> None:
        """Нечисловые значения → IncomparableNumbersError"""
        with pytest.raises(IncomparableNumbersError):
            to_canonical(value)


class TestToDecimalText:
    """Тесты to_decimal_text"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0"),
            (-42, "-42"),
            (0.1, "0.1"),
            (2.5, "2.5"),
            (Fraction(-1, 4), "-0.25"),
            (Decimal("1.50"), "1.50"),
            (ComparableNumber("3"), "3"),
        ],
    )
    def test_terminating(self, value, expected: str) -> None:
        """Конечная десятичная запись"""
        assert to_decimal_text(value) == expected

    def test_small_value_roundtrips(self) -> None:
        """Малые значения сохраняют точность"""
        assert Decimal(to_decimal_text(1e-7)) == Decimal("1e-7")

    def test_non_terminating_raises(self) -> None:
        """1/3 не имеет конечной десятичной записи"""
        with pytest.raises(IncomparableNumbersError, match="no finite decimal representation"):
            to_decimal_text(Fraction(1, 3))


# =============================================================================
# КОМПАРАТОР
# =============================================================================


class TestNumberComparator:
    """Тесты compare_numbers"""

    def test_same_type(self) -> None:
        """Одинаковый тип → собственный порядок"""
        assert compare_numbers(1, 2) == -1
        assert compare_numbers(2.5, 2.5) == 0
        assert compare_numbers(Decimal("3"), Decimal("-3")) == 1
        assert compare_numbers(ComparableNumber("1"), ComparableNumber("1.0")) == 0

    @pytest.mark.parametrize(
        "first, second",
        [
            (1, 1.0),
            (Decimal("1"), 1),
            (Fraction(1, 2), 0.5),
            (0.1, Decimal("0.1")),
            (ComparableNumber("1"), 1),
            (10**30, 1e30),
        ],
    )
    def test_cross_type_equality(self, first, second) -> None:
        """Равные значения разных типов → 0 в обе стороны"""
        assert compare_numbers(first, second) == 0
        assert compare_numbers(second, first) == 0

    def test_cross_type_order(self) -> None:
        """Порядок между разными типами"""
        assert compare_numbers(1, 1.5) == -1
        assert compare_numbers(Decimal("0.30000000000000001"), 0.3) == 1
        assert compare_numbers(Fraction(1, 3), Decimal("0.333")) == 1

    def test_none_raises(self) -> None:
        """None → MissingValueError"""
        with pytest.raises(MissingValueError):
            compare_numbers(None, 1)

    def test_faulty_ordering_propagates(self) -> None:
        """Ошибка собственного порядка не подавляется"""
        with pytest.raises(NotImplementedError):
            compare_numbers(FaultyNumber("1"), FaultyNumber("2"))

    def test_illegal_number_raises(self) -> None:
        """Нечисловая запись при разных типах → IncomparableNumbersError"""
        with pytest.raises(IncomparableNumbersError):
            compare_numbers(IllegalNumber("0"), 0)

    def test_shared_instance_and_callable(self) -> None:
        """Общий экземпляр; компаратор вызывается как функция"""
        assert get_number_comparator() is get_number_comparator()
        assert NumberComparator()(3, Decimal("2")) == 1


# =============================================================================
# БОЛЬШИЕ ЭКСПОНЕНТЫ
# =============================================================================


class TestExtremeExponents:
    """Экспонента записи не раскрывается в цифры"""

    @pytest.mark.parametrize(
        "first, second, expected",
        [
            (Decimal("1e999999999"), 1, 1),
            (0.5, Decimal("1e999999999"), -1),
            (Decimal("-1e999999999"), Fraction(1, 3), -1),
            (Decimal("1e-999999999"), 0, 1),
            (Decimal("1e-999999999"), 1e-300, -1),
        ],
    )
    def test_compare(self, first, second, expected: int) -> None:
        """Сравнение с крайними экспонентами"""
        assert compare_numbers(first, second) == expected
        assert compare_numbers(second, first) == -expected

    def test_decimal_text_keeps_exponent(self) -> None:
        """Decimal выводится своей записью"""
        assert to_decimal_text(Decimal("1e-999999999")) == "1E-999999999"
        assert to_decimal_text(Decimal("-2.5E+999999999")) == "-2.5E+999999999"
