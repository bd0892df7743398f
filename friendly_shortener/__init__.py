"""
friendly_shortener package initializer.
"""

from . import analytics
from . import navigation
from . import registry
from . import storage

__all__ = ["analytics", "navigation", "registry", "storage"]
