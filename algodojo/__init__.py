"""Classic algorithms, interview problems and dynamic-programming exercises."""

__version__ = "0.1.0"
__all__ = ["algorithm", "leetcode", "tessoku"]