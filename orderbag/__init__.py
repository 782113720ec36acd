"""A bag container with insertion, sorted, reverse, side-cross and middle-out iteration orders."""

__version__ = "0.1.0"
__all__ = ["container", "orders", "demo"]