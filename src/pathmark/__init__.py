"""Pathmark - path annotations and project trees for source repositories"""

__version__ = "0.1.0"
