"""
hof-numbers — higher-order функции на примере числовой обёртки.

Публичный API:
- ImmutableNumber: неизменяемое число с цепочкой чистых операций
- MutableNumber: императивный вариант для сравнения
"""

from hof_numbers.core.domain import ImmutableNumber, MutableNumber

__all__ = ["ImmutableNumber", "MutableNumber"]
