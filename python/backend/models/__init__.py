from backend.models.bucket import BucketState, Capacities, Move
from backend.models.solution import Infeasible, Result, Solved

__all__ = ["BucketState", "Capacities", "Infeasible", "Move", "Result", "Solved"]
