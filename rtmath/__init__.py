"""Vector and matrix math for ray tracing, with string, character, buffer, output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "strings", "numbers", "chars", "buffers", "output", "lines"]