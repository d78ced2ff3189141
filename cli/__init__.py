"""
wirebox CLI package
"""

from wirebox import __version__

__all__ = ['__version__']
