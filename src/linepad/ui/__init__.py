"""
UI package for drawing annotated lines with curses.

This package maps annotation types to curses color pairs and implements a
small read-only Viewer that renders lines through the highlighters.
"""

from .colors import attribute_for, draw_parts, init_colors
from .viewer import Viewer

__all__ = ['Viewer', 'attribute_for', 'draw_parts', 'init_colors']
