"""
Numerical Safeguards — Float Primitives for Tuple Arithmetic

Модуль содержит скалярные примитивы, на которых построена арифметика Tuple:
- Единственная константа толерантности EPSILON для приближённого равенства
- Epsilon-сравнение двух float
- Проверка валидности float (не NaN, не Inf)
- Деление по правилам IEEE-754 (без исключения на нулевом делителе)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EPSILON = 0.00001 фиксирован; потребители полагаются на это значение
2. Сравнение строгое: abs(a - b) < eps (граница eps считается различием)
3. Деление на ноль НЕ является ошибкой: результат ±inf или NaN
4. NaN/Inf не санитизируются на этом уровне, валидация на стороне вызывающего
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для покомпонентного равенства Tuple
EPSILON: Final[float] = 0.00001


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def within_epsilon(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Приближённое равенство двух float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < eps

    Сравнение нетранзитивно на границе толерантности: это свойство
    float-сравнения, а не ошибка.

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если разница строго меньше eps

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> within_epsilon(4.0, 4.00001)
        True
        >>> within_epsilon(1.0, 1.01)
        False
        >>> within_epsilon(float("nan"), float("nan"))
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(a - b) < eps


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ДЕЛЕНИЕ IEEE-754
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с результатом по IEEE-754 вместо ZeroDivisionError.

    Python бросает ZeroDivisionError при делении float на ноль, тогда как
    арифметика Tuple пропагирует бесконечности и NaN как обычные значения.

    Правила для нулевого делителя:
    - x / ±0 при x != 0: бесконечность со знаком sign(x) * sign(denominator)
    - 0 / ±0, NaN / ±0: NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть 0.0 или -0.0)

    Returns:
        numerator / denominator по правилам IEEE-754

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # copysign учитывает знак -0.0 у делителя
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
