"""Fronton skins - visual and audio presentation of a match."""

from .base import FrontonSkin
from .geometric import GeometricSkin
from .sounds import SoundBank

__all__ = ['FrontonSkin', 'GeometricSkin', 'SoundBank']
