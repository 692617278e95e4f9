"""
connectfour.interfaces - User interfaces for Connect Four

This package contains presentation layers that drive the game engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
