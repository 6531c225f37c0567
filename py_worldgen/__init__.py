"""
Deterministic, seeded generator for hierarchical fantasy worlds.
"""

__version__ = "0.1.0"
