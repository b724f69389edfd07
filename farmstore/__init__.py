"""
Farm Store: inventory and point-of-sale core for a small retail store.
"""

__version__ = "1.0.0"
