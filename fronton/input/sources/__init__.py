"""
Input source implementations.
"""

from fronton.input.sources.base import InputSource
from fronton.input.sources.pygame_controls import PygameControls, zone_at

__all__ = ['InputSource', 'PygameControls', 'zone_at']
