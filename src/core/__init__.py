"""
Core domain models and mathematical primitives.

This module contains the exact rational-number type, the numeric vector
container, and the pure numeric helpers they are built on.
"""
