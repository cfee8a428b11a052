"""
Core Interfaces Package

Interface definitions for the collaborators the routing services depend on.
"""

from .i_data_repository import IDataRepository
from .i_position_source import IPositionSource
from .i_notifier import INotifier

__all__ = [
    'IDataRepository',
    'IPositionSource',
    'INotifier'
]
