"""Laundry Closet: wardrobe catalogue and daily outfit suggestions."""

__version__ = "0.1.0"
