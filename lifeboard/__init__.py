"""Conway's Game of Life on a wrapping board with a framebuffer renderer."""

__version__ = "0.2.0"
__all__ = ["app", "game", "screen", "ui"]