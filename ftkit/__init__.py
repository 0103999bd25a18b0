"""Character, byte-buffer and string helpers, integer conversion and a minimal printf."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "numbers", "output", "printf", "strings", "transform"]