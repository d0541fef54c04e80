"""시스템 설정 클래스 정의"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..models import DisplayType
from ..utils.exceptions import ConfigurationError, InvalidParameterError
from ..utils.validators import validate_display_type
from .config_loader import get_config

# 호스트 파라미터 맵 키
PARAM_DISPLAY_TYPE = "displayType"


@dataclass
class FacemarkLBFParam:
    """태스크 파라미터 (표시 모드)"""

    display_type: int = 0  # 0: Points, 1: Face, 2: Delaunay

    def __post_init__(self):
        """설정 값 검증"""
        if isinstance(self.display_type, DisplayType):
            self.display_type = self.display_type.value
        validate_display_type(self.display_type)

    @property
    def display(self) -> DisplayType:
        return DisplayType(self.display_type)

    def set_param_map(self, param_map: Dict[str, str]):
        """
        문자열 맵에서 파라미터 설정

        Args:
            param_map: {'displayType': '1'} 형식의 맵

        Raises:
            InvalidParameterError: 키가 없거나 값이 정수가 아닌 경우
        """
        if PARAM_DISPLAY_TYPE not in param_map:
            raise InvalidParameterError(f"Missing parameter '{PARAM_DISPLAY_TYPE}'")

        value = param_map[PARAM_DISPLAY_TYPE]
        try:
            display_type = int(value)
        except (TypeError, ValueError):
            raise InvalidParameterError(
                f"Parameter '{PARAM_DISPLAY_TYPE}' must be an integer, got {value!r}"
            )

        validate_display_type(display_type)
        self.display_type = display_type

    def get_param_map(self) -> Dict[str, str]:
        """파라미터를 문자열 맵으로 반환"""
        return {PARAM_DISPLAY_TYPE: str(self.display_type)}

    @classmethod
    def from_config(cls) -> 'FacemarkLBFParam':
        """config.yaml의 task 섹션 기본값으로 생성"""
        return cls(display_type=int(get_config().get('task.display_type', 0)))


@dataclass
class DetectionConfig:
    """Haar cascade 얼굴 검출 설정"""

    cascade: str = "haarcascade_frontalface_default.xml"
    scale_factor: float = 1.1
    min_neighbors: int = 5
    min_size: int = 30

    def __post_init__(self):
        """설정 값 검증"""
        if self.scale_factor <= 1.0:
            raise ConfigurationError("scale_factor must be > 1.0")
        if self.min_neighbors < 0:
            raise ConfigurationError("min_neighbors must be >= 0")
        if self.min_size < 1:
            raise ConfigurationError("min_size must be >= 1")

    @classmethod
    def from_config(cls) -> 'DetectionConfig':
        """config.yaml의 face_detection 섹션으로 생성"""
        section = get_config().get('face_detection', {}) or {}
        return cls(**section)


@dataclass
class ModelConfig:
    """사전 학습 모델 위치 설정"""

    plugin_dir: str = "plugins"
    filename: str = "lbfmodel.yaml"
    url: Optional[str] = None

    @classmethod
    def from_config(cls) -> 'ModelConfig':
        """config.yaml의 model 섹션으로 생성"""
        section = get_config().get('model', {}) or {}
        return cls(**section)


@dataclass
class VisualizationStyle:
    """시각화 스타일 설정"""

    # 색상 (BGR 형식)
    landmark_color: Tuple[int, int, int] = (0, 255, 0)  # 녹색
    connection_color: Tuple[int, int, int] = (255, 0, 0)  # 파란색
    bbox_color: Tuple[int, int, int] = (0, 0, 255)  # 빨간색

    # 두께 (-1: 채움)
    landmark_thickness: int = -1
    connection_thickness: int = 1
    bbox_thickness: int = 2

    # 크기
    landmark_radius: int = 2

    @classmethod
    def from_config(cls) -> 'VisualizationStyle':
        """config.yaml의 visualization 섹션으로 생성"""
        section = dict(get_config().get('visualization', {}) or {})
        for key in ('landmark_color', 'connection_color', 'bbox_color'):
            if key in section:
                section[key] = tuple(section[key])
        return cls(**section)
