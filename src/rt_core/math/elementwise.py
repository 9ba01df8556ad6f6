"""
Elementwise — Generic Combinators over Float Sequences

Арифметика Tuple порождается из небольшого набора обобщённых функций,
параметризованных скалярной операцией. Каждый оператор (add/sub/mul/div,
умножение и деление на скаляр, отрицание) сохраняет собственную семантику,
но разделяет одно тело цикла.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок элементов сохраняется: result[i] зависит только от входов с индексом i
2. Входы никогда не изменяются, всегда возвращается новый tuple
3. zip_with и all_pairs требуют равной длины операндов
"""

from collections.abc import Callable, Iterable, Sequence

BinaryOp = Callable[[float, float], float]
UnaryOp = Callable[[float], float]
Predicate = Callable[[float, float], bool]


def _require_same_length(left: Sequence[float], right: Sequence[float]) -> None:
    if len(left) != len(right):
        raise ValueError(f"Length mismatch: {len(left)} != {len(right)}")


def zip_with(op: BinaryOp, left: Sequence[float], right: Sequence[float]) -> tuple[float, ...]:
    """
    Покомпонентное применение бинарной операции к двум последовательностям.

    Args:
        op: Скалярная операция, например operator.add
        left: Левый операнд
        right: Правый операнд той же длины

    Returns:
        tuple из op(left[i], right[i]) для всех i

    Raises:
        ValueError: Если длины операндов различаются

    Examples:
        >>> import operator
        >>> zip_with(operator.add, (1.0, 2.0), (3.0, 4.0))
        (4.0, 6.0)
    """
    _require_same_length(left, right)
    return tuple(op(a, b) for a, b in zip(left, right))


def map_scalar(op: BinaryOp, values: Iterable[float], scalar: float) -> tuple[float, ...]:
    """
    Применение бинарной операции к каждому элементу и фиксированному скаляру.

    Examples:
        >>> import operator
        >>> map_scalar(operator.mul, (1.0, 2.0), 0.5)
        (0.5, 1.0)
    """
    return tuple(op(v, scalar) for v in values)


def map_unary(op: UnaryOp, values: Iterable[float]) -> tuple[float, ...]:
    """Применение унарной операции к каждому элементу."""
    return tuple(op(v) for v in values)


def all_pairs(predicate: Predicate, left: Sequence[float], right: Sequence[float]) -> bool:
    """
    Проверка предиката для всех пар элементов с одинаковым индексом.

    Для пустых последовательностей возвращает True.

    Raises:
        ValueError: Если длины операндов различаются
    """
    _require_same_length(left, right)
    return all(predicate(a, b) for a, b in zip(left, right))
