"""A small real-time tower defense game with a pygame window and a windowless game model."""

__version__ = "0.1.0"
__all__ = ["__version__"]