"""
Arithmetic — first-order функции и higher-order помощники

Модуль разделяет два уровня:
- First-order функции: обычная арифметика над двумя числами
- Higher-order функции: принимают и/или возвращают функции
  (apply, compose, pipe)

ФОРМУЛЫ:
    apply(f, b)(a)          = f(a, b)
    compose(f, g, h)(x)     = f(g(h(x)))
    pipe(x, f, g, h)        = h(g(f(x)))

Все функции чистые: результат зависит только от аргументов,
побочных эффектов нет.
"""

from functools import reduce
from typing import Callable, Final

BinaryOp = Callable[[float, float], float]
UnaryOp = Callable[[float], float]


# =============================================================================
# FIRST-ORDER ФУНКЦИИ
# =============================================================================


def add(a: float, b: float) -> float:
    """a + b"""
    return a + b


def subtract(a: float, b: float) -> float:
    """a - b"""
    return a - b


def multiply(a: float, b: float) -> float:
    """a * b"""
    return a * b


def divide(a: float, b: float) -> float:
    """
    a / b

    Raises:
        ZeroDivisionError: Если b == 0
    """
    return a / b


# =============================================================================
# HIGHER-ORDER ФУНКЦИИ
# =============================================================================


def apply(fn: BinaryOp, operand: float) -> UnaryOp:
    """
    Частичное применение бинарной функции по второму аргументу.

    Возвращает замыкание, которое фиксирует operand и ждёт первый аргумент.

    Args:
        fn: Бинарная функция (например, divide)
        operand: Значение второго аргумента

    Returns:
        Унарная функция x -> fn(x, operand)

    Examples:
        >>> apply(divide, 2)(10)
        5.0
        >>> apply(multiply, 3)(4)
        12
    """

    def applied(value: float) -> float:
        return fn(value, operand)

    applied.__name__ = f"{getattr(fn, '__name__', 'fn')}_by_{operand}"
    return applied


def compose(*fns: UnaryOp) -> UnaryOp:
    """
    Композиция функций справа налево.

    compose(f, g)(x) == f(g(x)). Без аргументов возвращает identity.
    """

    def composed(value: float) -> float:
        return reduce(lambda acc, fn: fn(acc), reversed(fns), value)

    return composed


def pipe(value: float, *fns: UnaryOp) -> float:
    """
    Последовательное применение функций слева направо.

    Examples:
        >>> pipe(270, THIRD, HALF, THIRD)
        15.0
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)


# =============================================================================
# ГОТОВЫЕ ОПЕРАЦИИ
# =============================================================================

HALF: Final[UnaryOp] = apply(divide, 2)
THIRD: Final[UnaryOp] = apply(divide, 3)
