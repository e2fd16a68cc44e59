"""Character, memory, string and output helpers, a minimal printf and a line reader."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "printf", "nextline", "demo"]