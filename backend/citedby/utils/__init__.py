"""
Utility modules for GetCitedBy
"""

from .logging import configure_logging

__all__ = [
    "configure_logging",
]
