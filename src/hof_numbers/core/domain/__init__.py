"""
Domain models and value objects.
"""

from hof_numbers.core.domain.immutable_number import ImmutableNumber
from hof_numbers.core.domain.mutable_number import MutableNumber

__all__ = [
    "ImmutableNumber",
    "MutableNumber",
]
