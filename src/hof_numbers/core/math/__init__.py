"""
Core math modules для hof-numbers

Арифметические примитивы, higher-order помощники и epsilon-сравнение float.
"""

# Numerical Safeguards
from hof_numbers.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

# Arithmetic
from hof_numbers.core.math.arithmetic import (
    HALF,
    THIRD,
    BinaryOp,
    UnaryOp,
    add,
    apply,
    compose,
    divide,
    multiply,
    pipe,
    subtract,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: Comparison
    "is_close",
    # Arithmetic: Types
    "BinaryOp",
    "UnaryOp",
    # Arithmetic: First-order
    "add",
    "subtract",
    "multiply",
    "divide",
    # Arithmetic: Higher-order
    "apply",
    "compose",
    "pipe",
    "HALF",
    "THIRD",
]
