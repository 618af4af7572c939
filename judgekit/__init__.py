"""Solutions to classic online-judge problems, as plain functions."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "dynamic", "game2048", "graphs", "search", "textual", "trees"]