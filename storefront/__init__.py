"""Storefront backend proxying catalog, cart and checkout calls to Square."""

__version__ = "0.1.0"
