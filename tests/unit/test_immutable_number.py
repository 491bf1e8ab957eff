"""
Тесты для ImmutableNumber

Проверяет:
1. Формулы half/third/multiply_by
2. Immutability (frozen=True, операнды не меняются)
3. Цепочки операций и контрольный расчёт от 270
4. Отсутствие общего состояния между экземплярами
5. Сериализацию через контракт number_snapshot
"""

import math

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from hof_numbers import ImmutableNumber
from hof_numbers.core.math import HALF, THIRD, apply, multiply


# =============================================================================
# КОНСТРУКТОР
# =============================================================================


class TestConstruction:
    """Тесты создания ImmutableNumber"""

    def test_positional_value(self) -> None:
        assert ImmutableNumber(270).value == 270.0

    def test_keyword_value(self) -> None:
        assert ImmutableNumber(value=2.5).value == 2.5

    def test_int_stored_as_float(self) -> None:
        assert isinstance(ImmutableNumber(7).value, float)

    def test_numeric_string_coerced(self) -> None:
        """Pydantic lax mode: числовая строка приводится к float"""
        assert ImmutableNumber("3.5").value == 3.5

    @pytest.mark.parametrize("bad", ["abc", None, [1.0], {"value": 1.0}])
    def test_non_numeric_rejected(self, bad) -> None:
        with pytest.raises(ValidationError):
            ImmutableNumber(bad)

    def test_non_finite_accepted(self) -> None:
        assert math.isinf(ImmutableNumber(float("inf")).value)
        assert math.isnan(ImmutableNumber(float("nan")).value)


# =============================================================================
# ФОРМУЛЫ
# =============================================================================


class TestOperations:
    """Тесты формул операций"""

    @pytest.mark.parametrize("x", [0.0, 1.0, -4.0, 270.0, 1e-300, 1e300, 0.1])
    def test_half(self, x: float) -> None:
        assert ImmutableNumber(x).half().value == x / 2

    @pytest.mark.parametrize("x", [0.0, 1.0, -4.0, 270.0, 1e-300, 1e300, 0.1])
    def test_third(self, x: float) -> None:
        assert ImmutableNumber(x).third().value == x / 3

    @pytest.mark.parametrize(
        "x, y",
        [(2.0, 3.0), (-1.5, 4.0), (0.0, 1e10), (10.0, 15.0), (0.1, 0.2)],
    )
    def test_multiply_by(self, x: float, y: float) -> None:
        assert ImmutableNumber(x).multiply_by(ImmutableNumber(y)).value == x * y

    def test_multiply_by_overflow_is_total(self) -> None:
        result = ImmutableNumber(1e200).multiply_by(ImmutableNumber(1e200))
        assert math.isinf(result.value)

    @pytest.mark.parametrize("bad", [2, 2.0, "2", None])
    def test_multiply_by_rejects_non_number_operand(self, bad) -> None:
        with pytest.raises(TypeError, match="ImmutableNumber"):
            ImmutableNumber(1.0).multiply_by(bad)

    def test_operations_return_new_instances(self) -> None:
        n = ImmutableNumber(6)
        assert n.half() is not n
        assert n.third() is not n
        assert n.multiply_by(ImmutableNumber(1)) is not n

    def test_transform_with_higher_order_operation(self) -> None:
        n = ImmutableNumber(270)
        assert n.transform(THIRD).transform(HALF).value == n.third().half().value
        assert n.transform(apply(multiply, 2)).value == 540.0


# =============================================================================
# IMMUTABILITY
# =============================================================================


class TestImmutability:
    """Тесты неизменяемости"""

    def test_assignment_rejected(self) -> None:
        n = ImmutableNumber(1.0)
        with pytest.raises(ValidationError):
            n.value = 2.0
        assert n.value == 1.0

    def test_receiver_unchanged_after_operations(self) -> None:
        n = ImmutableNumber(270)
        n.half()
        n.third()
        n.multiply_by(ImmutableNumber(3))
        n.transform(lambda v: v + 1)
        assert n.value == 270.0

    def test_operand_unchanged_after_multiply(self) -> None:
        n = ImmutableNumber(4)
        other = ImmutableNumber(5)
        n.multiply_by(other)
        assert other.value == 5.0

    def test_hashable_and_equal_by_value(self) -> None:
        a = ImmutableNumber(3)
        b = ImmutableNumber(3.0)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


# =============================================================================
# ЦЕПОЧКИ
# =============================================================================


class TestChaining:
    """Контрольный расчёт от 270"""

    @pytest.fixture
    def n(self) -> ImmutableNumber:
        return ImmutableNumber(270)

    def test_three_thirds(self, n: ImmutableNumber) -> None:
        assert n.third().third().third().value == 10.0

    def test_third_half_third(self, n: ImmutableNumber) -> None:
        assert n.third().half().third().value == 15.0

    def test_product_of_chains_and_half(self, n: ImmutableNumber) -> None:
        a = n.third().third().third()
        b = n.third().half().third()
        product = a.multiply_by(b)
        assert product.value == 150.0
        assert product.half().value == 75.0
        assert n.value == 270.0

    def test_ten_by_five(self) -> None:
        product = ImmutableNumber(10).multiply_by(ImmutableNumber(5))
        assert product.value == 50.0
        assert product.half().value == 25.0

    def test_long_chain_is_close(self) -> None:
        result = ImmutableNumber(1.0).third().multiply_by(ImmutableNumber(3))
        assert result.is_close(ImmutableNumber(1.0))
        assert not result.is_close(ImmutableNumber(1.1))

    @pytest.mark.parametrize("bad", [1.0, 1, "1", None])
    def test_is_close_rejects_non_number_operand(self, bad) -> None:
        with pytest.raises(TypeError, match="is_close expects ImmutableNumber"):
            ImmutableNumber(1.0).is_close(bad)


# =============================================================================
# ОБЩЕЕ СОСТОЯНИЕ
# =============================================================================


class TestNoSharedState:
    """Независимые экземпляры не влияют друг на друга"""

    def test_independent_instances(self) -> None:
        a = ImmutableNumber(12)
        b = ImmutableNumber(12)

        a_result = a.half().half()
        b_result = b.third()

        assert a.value == b.value == 12.0
        assert a_result.value == 3.0
        assert b_result.value == 4.0

    def test_same_chain_same_result(self) -> None:
        a = ImmutableNumber(81).third().third()
        b = ImmutableNumber(81).third().third()
        assert a == b


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestSnapshot:
    """Тесты to_dict/from_dict"""

    def test_to_dict(self) -> None:
        assert ImmutableNumber(2.5).to_dict() == {"value": 2.5}

    def test_from_dict(self) -> None:
        n = ImmutableNumber.from_dict({"value": 42})
        assert n == ImmutableNumber(42)

    def test_from_dict_preserves_chain_result(self) -> None:
        n = ImmutableNumber(270).third().half()
        assert ImmutableNumber.from_dict(n.to_dict()) == n

    @pytest.mark.parametrize(
        "data",
        [{}, {"value": "1"}, {"value": True}, {"value": 1, "extra": 2}],
    )
    def test_from_dict_rejects_invalid(self, data) -> None:
        with pytest.raises(SchemaValidationError):
            ImmutableNumber.from_dict(data)
