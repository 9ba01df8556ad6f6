"""
Core math modules для rt-core

Скалярные примитивы и обобщённые покомпонентные комбинаторы.
"""

# Numerical Safeguards
from src.rt_core.math.numerical_safeguards import (
    EPSILON,
    ieee_divide,
    is_valid_float,
    within_epsilon,
)

# Elementwise combinators
from src.rt_core.math.elementwise import (
    BinaryOp,
    Predicate,
    UnaryOp,
    all_pairs,
    map_scalar,
    map_unary,
    zip_with,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPSILON",
    # Numerical Safeguards — Functions
    "ieee_divide",
    "is_valid_float",
    "within_epsilon",
    # Elementwise — Types
    "BinaryOp",
    "Predicate",
    "UnaryOp",
    # Elementwise — Functions
    "all_pairs",
    "map_scalar",
    "map_unary",
    "zip_with",
]
