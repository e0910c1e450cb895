"""Small pygame arcade games (snake, falling blocks, a shooter) and drawing demos."""

__version__ = "1.0.0"