from backend.engine.gamesolver.config import SolverConfig
from backend.engine.gamesolver.solver import Solver, SolverError, solve

__all__ = ["Solver", "SolverConfig", "SolverError", "solve"]
