"""
Facemark LBF Plugin
OpenCV FacemarkLBF 기반 얼굴 랜드마크 검출 태스크
"""

__version__ = "1.0.0"
__author__ = "Hyundai Mobis"

from .config.settings import FacemarkLBFParam
from .models import DisplayType
from .processing.facemark_task import FacemarkLBFTask
from .processing.factory import FacemarkLBFFactory

__all__ = [
    'FacemarkLBFParam',
    'DisplayType',
    'FacemarkLBFTask',
    'FacemarkLBFFactory',
]
