"""
Configuration for world generation: runtime settings and static lookup tables.
"""

from .config import Settings, settings

__all__ = ["Settings", "settings"]
