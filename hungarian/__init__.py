"""Hungarian method for minimum-cost and maximum-profit assignment problems."""

__version__ = "1.0.0"
__all__ = ["__version__"]