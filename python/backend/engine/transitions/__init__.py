from backend.engine.transitions.rules import apply_move, is_goal, successors

__all__ = ["apply_move", "is_goal", "successors"]
