"""
Contract Validation Module

Валидация JSON контрактов hof-numbers.
"""

from .validators import (
    ContractValidator,
    NumberSnapshotValidator,
    SchemaLoader,
    validate_number_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberSnapshotValidator",
    # Functions
    "validate_number_snapshot",
]
