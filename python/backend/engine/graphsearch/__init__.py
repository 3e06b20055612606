from backend.engine.graphsearch.bfs import SearchLimitExceeded, bfs

__all__ = ["SearchLimitExceeded", "bfs"]
