"""
Core domain models, mathematical primitives, and optics operations.

Everything here is pure and stateless: value types are immutable and every
operation is a function of its inputs only.
"""
