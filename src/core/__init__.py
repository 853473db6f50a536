"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of arithmetic
progressions that are independent of how the sequence is consumed.
"""
