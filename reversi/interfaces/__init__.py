"""
reversi.interfaces - User interfaces for Reversi

This package contains ways of interacting with the engine from outside,
currently the command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
