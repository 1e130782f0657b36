"""Terminal point-of-sale: load a JSON menu, browse it, fill a cart and check out."""

__version__ = "0.1.0"