from backend.engine.feasibility.checker import gcd, is_solvable

__all__ = ["gcd", "is_solvable"]
