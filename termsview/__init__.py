"""A scrollable terms-of-service agreement window and its scrolling state."""

__version__ = "0.1.0"
__all__ = ["__version__"]