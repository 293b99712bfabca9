"""
Data models shared by the layout engine, the renderer and the HTTP surface.
"""
from .graph import Place, Road, GraphSnapshot, RouteResult, NodePosition

__all__ = [
    'Place',
    'Road',
    'GraphSnapshot',
    'RouteResult',
    'NodePosition'
]
