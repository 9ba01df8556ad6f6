"""
Numeric primitives for the rt-core geometry stack.

Contains the fixed-dimension Tuple value type and the float primitives it is
built from. Higher-level types (points, vectors, colors) build on top of it.
"""
