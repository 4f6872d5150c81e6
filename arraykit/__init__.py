"""Classic array, string and search algorithms grouped by technique."""

__version__ = "0.1.0"
__all__ = ["misc", "searching", "sliding_window", "two_pointers"]