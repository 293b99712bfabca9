from dataclasses import dataclass


@dataclass
class LayoutParams:
    """Layout parameters shared by the force and grid layouts"""
    padding: float = 40.0
    iterations: int = 100
    damping: float = 0.9
    # Above this many places the O(n^2) simulation is replaced by the grid
    force_threshold: int = 20
