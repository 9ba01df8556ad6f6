"""
Tuple — Fixed-Dimension Numeric Value Type

Immutable Pydantic модель: упорядоченная последовательность из N float.
Базовый примитив для точек, векторов и цветов.

Операции:
- Покомпонентные: add, sub, mul (Hadamard), div
- Скалярные: mul_scalar, div_scalar
- Отрицание: negate
- Приближённое равенство с EPSILON = 0.00001

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размерность N фиксирована на всё время жизни значения
2. Операции никогда не изменяют операнды, всегда возвращается новый Tuple
3. Операнды бинарных операций обязаны иметь одинаковую размерность
   (DimensionMismatch при нарушении)
4. Выход индекса за [0, N) — ошибка программиста (IndexOutOfBounds)
5. Деление на ноль не является ошибкой: ±inf / NaN по IEEE-754
"""

import operator
from collections.abc import Callable, Iterable, Iterator
from numbers import Real

from pydantic import BaseModel, Field, field_validator

from src.rt_core.math.elementwise import (
    BinaryOp,
    all_pairs,
    map_scalar,
    map_unary,
    zip_with,
)
from src.rt_core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    within_epsilon,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class IndexOutOfBounds(AssertionError):
    """
    Нарушение предусловия 0 <= index < N.

    Ошибка программиста, а не recoverable-состояние: библиотека никогда
    не перехватывает это исключение и не подменяет результат значением
    по умолчанию.
    """

    def __init__(self, length: int, index: int) -> None:
        self.length = length
        self.index = index
        super().__init__(f"Index out of bounds: the len is {length} but the index is {index}")


class DimensionMismatch(ValueError):
    """Операнды бинарной операции имеют разную размерность."""

    def __init__(self, operation: str, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"{operation}: dimension mismatch, left has {left} components but right has {right}"
        )


# =============================================================================
# OPERATOR FACTORIES
# =============================================================================


def _elementwise(name: str, op: BinaryOp) -> Callable[["Tuple", "Tuple"], "Tuple"]:
    def method(self: "Tuple", other: "Tuple") -> "Tuple":
        self._require_same_dim(name, other)
        return type(self)(data=zip_with(op, self.data, other.data))

    method.__name__ = name
    method.__doc__ = f"Покомпонентная операция {name}: result[i] = {op.__name__}(a[i], b[i])."
    return method


def _scalar(name: str, op: BinaryOp) -> Callable[["Tuple", float], "Tuple"]:
    def method(self: "Tuple", scalar: float) -> "Tuple":
        return type(self)(data=map_scalar(op, self.data, scalar))

    method.__name__ = name
    method.__doc__ = f"Скалярная операция {name}: result[i] = {op.__name__}(a[i], k)."
    return method


# =============================================================================
# TUPLE MODEL
# =============================================================================


class Tuple(BaseModel):
    """
    Упорядоченная последовательность из N float фиксированной длины.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Размерность проверяется в runtime в начале каждой бинарной операции.

    Equality приближённое (abs(a[i] - b[i]) < EPSILON), поэтому Tuple
    не хешируется.
    """

    data: tuple[float, ...] = Field(..., description="Компоненты в порядке индексов")

    model_config = {"frozen": True}  # Immutable

    __hash__ = None  # type: ignore[assignment]

    @field_validator("data", mode="before")
    @classmethod
    def validate_numeric_components(cls, v: object) -> object:
        """
        Запрет строк: lax-валидация float иначе превращает "1.5" в 1.5,
        а строку целиком в последовательность символов.
        """
        if isinstance(v, (str, bytes)):
            raise ValueError(f"data must be a sequence of numbers, got {type(v).__name__}")
        if isinstance(v, (list, tuple)):
            for i, component in enumerate(v):
                if isinstance(component, (str, bytes)):
                    raise ValueError(
                        f"data[{i}] must be a number, got {type(component).__name__} {component!r}"
                    )
        return v

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Tuple":
        """
        Создание Tuple из массива скаляров.

        Значения копируются как есть, порядок сохраняется.

        Examples:
            >>> Tuple.from_array([1.0, 2.0, 3.0, 4.0]).dim
            4
        """
        if isinstance(values, (str, bytes)):
            # строка целиком отклоняется валидатором, а не разбивается на символы
            return cls(data=values)
        return cls(data=tuple(values))

    @property
    def dim(self) -> int:
        """Размерность N."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.data)

    def __getitem__(self, index: int) -> float:
        """
        Доступ к i-му элементу.

        Отрицательные индексы не поддерживаются (нет wraparound).

        Raises:
            IndexOutOfBounds: Если index вне [0, N)
            TypeError: Если index не целое число
        """
        i = operator.index(index)
        if not 0 <= i < len(self.data):
            raise IndexOutOfBounds(len(self.data), i)
        return self.data[i]

    def _require_same_dim(self, operation: str, other: "Tuple") -> None:
        if not isinstance(other, Tuple):
            raise TypeError(f"{operation}: expected Tuple, got {type(other).__name__}")
        if self.dim != other.dim:
            raise DimensionMismatch(operation, self.dim, other.dim)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    add = _elementwise("add", operator.add)
    sub = _elementwise("sub", operator.sub)
    mul = _elementwise("mul", operator.mul)
    div = _elementwise("div", ieee_divide)

    mul_scalar = _scalar("mul_scalar", operator.mul)
    div_scalar = _scalar("div_scalar", ieee_divide)

    def negate(self) -> "Tuple":
        """Отрицание: result[i] = -a[i]."""
        return type(self)(data=map_unary(operator.neg, self.data))

    def __add__(self, other: object) -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Tuple":
        if isinstance(other, Tuple):
            return self.mul(other)
        if isinstance(other, Real):
            return self.mul_scalar(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Tuple":
        if isinstance(other, Real):
            return self.mul_scalar(float(other))
        return NotImplemented

    def __truediv__(self, other: object) -> "Tuple":
        if isinstance(other, Tuple):
            return self.div(other)
        if isinstance(other, Real):
            return self.div_scalar(float(other))
        return NotImplemented

    def __neg__(self) -> "Tuple":
        return self.negate()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: "Tuple") -> bool:
        """
        Приближённое равенство: abs(a[i] - b[i]) < EPSILON для всех i.

        Raises:
            DimensionMismatch: Если размерности различаются
        """
        self._require_same_dim("equals", other)
        return all_pairs(within_epsilon, self.data, other.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.equals(other)

    def is_finite(self) -> bool:
        """
        Все компоненты конечны (не NaN, не Inf).

        Tuple сам ничего не валидирует; проверка для вызывающего кода.
        """
        return all(is_valid_float(v) for v in self.data)

