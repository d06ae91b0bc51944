from backend.engine.gamesolver.solver import SearchResult, Solver

__all__ = ["SearchResult", "Solver"]
