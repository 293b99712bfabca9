"""
Raster surface backed by a matplotlib Figure on the Agg canvas.

The single axes spans the whole figure and its data coordinates are pixels:
origin at the top-left corner, y growing downward, exactly like a browser canvas.
"""
from typing import Union
from io import BytesIO
from pathlib import Path
import logging

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

logger = logging.getLogger(__name__)

DEFAULT_DPI = 100


class RasterSurface:
    """A width x height pixel surface the renderer draws on."""

    def __init__(self, width: int, height: int, dpi: int = DEFAULT_DPI):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface dimensions must be positive, got {width}x{height}")
        self.dpi = dpi
        self.width = int(width)
        self.height = int(height)
        self.figure = Figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
        self.canvas = FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self._setup_axes()

    def _setup_axes(self) -> None:
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_axis_off()
        self.ax.set_autoscale_on(False)
        self.ax.margins(0)

    def points(self, pixels: float) -> float:
        """Convert a size in pixels to typographic points for linewidths and fonts"""
        return pixels * 72.0 / self.dpi

    def clear(self) -> None:
        """Drop every drawn artist, keeping the pixel geometry"""
        self.ax.cla()
        self._setup_axes()

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.figure.set_size_inches(self.width / self.dpi, self.height / self.dpi)
        self.clear()
        logger.debug(f"Surface resized to {self.width}x{self.height}")

    def to_rgba(self) -> np.ndarray:
        """Rasterize and return a (height, width, 4) uint8 copy of the pixels"""
        self.canvas.draw()
        return np.asarray(self.canvas.buffer_rgba()).copy()

    def to_png(self) -> bytes:
        buf = BytesIO()
        self.figure.savefig(buf, format="png", dpi=self.dpi, facecolor=self.figure.get_facecolor())
        return buf.getvalue()

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_bytes(self.to_png())
        logger.info(f"Saved frame to {path}")
        return path
