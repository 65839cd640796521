"""A snake game for the terminal: game logic, terminal drawing and a command line entry point."""

__version__ = "1.0.0"
__all__ = ["__version__"]