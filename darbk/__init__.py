"""
Darbk

Station graph, routing and route-progress library for the Riyadh Metro.
"""

from .version import __version__, __app_name__

__all__ = ['__version__', '__app_name__']
