"""
ImmutableNumber — неизменяемая числовая обёртка

Immutable Pydantic модель (frozen=True). Каждая операция возвращает новый
экземпляр, исходный никогда не меняется, поэтому вызовы можно
свободно сцеплять:

    >>> n = ImmutableNumber(270)
    >>> n.third().half().third().value
    15.0
    >>> n.value
    270.0

Операции:
    half()            value / 2
    third()           value / 3
    multiply_by(o)    value * o.value
    transform(fn)     fn(value)
"""

from typing import Any, Callable, Dict

from pydantic import BaseModel, Field

from hof_numbers.core.contracts.validators import validate_number_snapshot
from hof_numbers.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)


class ImmutableNumber(BaseModel):
    """
    Числовое значение с цепочкой чистых арифметических операций.

    Immutable модель (frozen=True): присваивание value вызывает
    ValidationError. Операнд multiply_by только читается.
    """

    value: float = Field(..., description="Хранимое числовое значение (float)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: float) -> None:
        super().__init__(value=value)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def half(self) -> "ImmutableNumber":
        """Новый экземпляр со значением value / 2."""
        return ImmutableNumber(self.value / 2)

    def third(self) -> "ImmutableNumber":
        """Новый экземпляр со значением value / 3."""
        return ImmutableNumber(self.value / 3)

    def multiply_by(self, other: "ImmutableNumber") -> "ImmutableNumber":
        """
        Произведение двух значений.

        Args:
            other: Второй множитель (не изменяется)

        Returns:
            Новый экземпляр со значением self.value * other.value

        Raises:
            TypeError: Если other не является ImmutableNumber
        """
        if not isinstance(other, ImmutableNumber):
            raise TypeError(
                f"multiply_by expects ImmutableNumber, got {type(other).__name__}"
            )
        return ImmutableNumber(self.value * other.value)

    def transform(self, fn: Callable[[float], float]) -> "ImmutableNumber":
        """
        Применение произвольной унарной функции к значению.

        Args:
            fn: Чистая функция float -> float (например, arithmetic.HALF)

        Returns:
            Новый экземпляр со значением fn(self.value)
        """
        return ImmutableNumber(fn(self.value))

    # -------------------------------------------------------------------------
    # Сравнение и сериализация
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "ImmutableNumber",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение значений с учётом машинной точности.

        Raises:
            TypeError: Если other не является ImmutableNumber
        """
        if not isinstance(other, ImmutableNumber):
            raise TypeError(
                f"is_close expects ImmutableNumber, got {type(other).__name__}"
            )
        return is_close(self.value, other.value, rel_tol=rel_tol, abs_tol=abs_tol)

    def to_dict(self) -> Dict[str, Any]:
        """Снимок в формате контракта number_snapshot."""
        return {"value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImmutableNumber":
        """
        Создание экземпляра из снимка number_snapshot.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_number_snapshot(data)
        return cls(data["value"])
