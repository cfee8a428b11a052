"""
Version information for Darbk.

Centralized version management for the library and its command line tool.
"""

# Core application information
__version__ = "1.2.0"
__app_name__ = "Darbk"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"
