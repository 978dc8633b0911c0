"""Configuration package for Report Views."""

from .settings import Settings
from .translations import Translations

__all__ = ['Settings', 'Translations']
