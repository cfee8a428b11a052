"""
Managers package for Darbk.
"""

from .config_manager import ConfigManager, ConfigData, ConfigurationError

__all__ = ['ConfigManager', 'ConfigData', 'ConfigurationError']
