"""Solutions to classic recursion and array exercises."""

__version__ = "0.1.0"
__all__ = ["recursion", "recursion_problems", "arrays", "array_algorithms"]