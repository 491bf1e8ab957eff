"""
MutableNumber — императивный вариант числовой обёртки

Операции меняют value на месте и возвращают self, поэтому цепочка
вызовов выглядит так же, как у ImmutableNumber, но все ссылки на
объект видят изменённое значение:

    >>> n = MutableNumber(270)
    >>> m = n.third()
    >>> m is n, n.value
    (True, 90.0)

Не потокобезопасен. Для разделяемых значений используйте
ImmutableNumber (см. freeze()).
"""

from dataclasses import dataclass
from typing import Union

from hof_numbers.core.domain.immutable_number import ImmutableNumber


@dataclass
class MutableNumber:
    """Число с операциями, изменяющими состояние экземпляра."""

    value: float

    def __post_init__(self) -> None:
        self.value = float(self.value)

    def half(self) -> "MutableNumber":
        self.value = self.value / 2
        return self

    def third(self) -> "MutableNumber":
        self.value = self.value / 3
        return self

    def multiply_by(self, other: Union["MutableNumber", ImmutableNumber]) -> "MutableNumber":
        """
        Умножение на месте: self.value *= other.value

        Args:
            other: Множитель; читается только other.value

        Raises:
            TypeError: Если other не MutableNumber и не ImmutableNumber
        """
        if not isinstance(other, (MutableNumber, ImmutableNumber)):
            raise TypeError(
                f"multiply_by expects MutableNumber or ImmutableNumber, "
                f"got {type(other).__name__}"
            )
        self.value = self.value * other.value
        return self

    def freeze(self) -> ImmutableNumber:
        """Неизменяемый снимок текущего значения."""
        return ImmutableNumber(self.value)
