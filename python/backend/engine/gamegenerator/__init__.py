from backend.engine.gamegenerator.generator import GameGenerator, Puzzle

__all__ = ["GameGenerator", "Puzzle"]
