"""
Layout package: force simulation, grid fallback and the engine that picks one.
"""
from .params import LayoutParams
from .force_simulator import ForceSimulator, force_layout
from .grid_layout import GridFallbackLayout
from .engine import LayoutEngine, LayoutResult, layout

__all__ = [
    'LayoutParams',
    'ForceSimulator',
    'force_layout',
    'GridFallbackLayout',
    'LayoutEngine',
    'LayoutResult',
    'layout'
]
