"""Processing layer components"""

from .facemark_task import FacemarkLBFTask
from .factory import FacemarkLBFFactory
from .renderer import LandmarkRenderer, clip_triangles, draw_graphics_on_image

__all__ = [
    'FacemarkLBFTask',
    'FacemarkLBFFactory',
    'LandmarkRenderer',
    'clip_triangles',
    'draw_graphics_on_image',
]
