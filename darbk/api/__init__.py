"""
HTTP access to the metro open data portal.
"""

from .open_data_client import OpenDataClient, APIException, NetworkException

__all__ = ['OpenDataClient', 'APIException', 'NetworkException']
