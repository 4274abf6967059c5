from .solution import Solution, find_gcd

__all__ = ["Solution", "find_gcd"]
