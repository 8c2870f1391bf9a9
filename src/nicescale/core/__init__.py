"""
Core domain models, mathematical primitives, and invariants.

This module contains the tick computation building blocks; they are
independent of any rendering or chart layer.
"""
