"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks: scalar comparison,
vectors, matrices and Gaussian reduction.
"""
