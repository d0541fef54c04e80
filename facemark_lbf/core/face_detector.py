"""OpenCV Haar cascade 기반 얼굴 검출기"""

import os
from typing import List

import cv2
import numpy as np

from ..config.settings import DetectionConfig
from ..models import GraphicsItem
from ..utils.exceptions import ConfigurationError
from ..utils.validators import validate_image


class HaarFaceDetector:
    """Haar cascade 얼굴 검출기 (랜드마크 입력용 바운딩 박스 생성)"""

    def __init__(self, config: DetectionConfig = None):
        """
        초기화

        Args:
            config: 검출 설정 (None이면 config.yaml 값)

        Raises:
            ConfigurationError: cascade 파일을 로드할 수 없는 경우
        """
        self.config = config or DetectionConfig.from_config()

        cascade_path = self.config.cascade
        if not os.path.isabs(cascade_path):
            cascade_dir = getattr(getattr(cv2, 'data', None), 'haarcascades', None)
            if cascade_dir is None:
                raise ConfigurationError(
                    "cv2.data is not available, set face_detection.cascade to an absolute path"
                )
            cascade_path = os.path.join(cascade_dir, cascade_path)

        if not os.path.exists(cascade_path):
            raise ConfigurationError(f"Haar cascade not found: {cascade_path}")

        self.classifier = cv2.CascadeClassifier(cascade_path)
        if self.classifier.empty():
            raise ConfigurationError(f"Failed to load Haar cascade: {cascade_path}")

    def detect(self, image: np.ndarray) -> List[GraphicsItem]:
        """
        이미지에서 얼굴 검출

        Args:
            image: BGR 또는 grayscale 이미지

        Returns:
            얼굴 바운딩 박스 그래픽 주석 리스트
        """
        validate_image(image)

        gray = image
        if image.ndim == 3 and image.shape[2] == 3:
            gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
        elif image.ndim == 3 and image.shape[2] == 4:
            gray = cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)

        faces = self.classifier.detectMultiScale(
            gray,
            scaleFactor=self.config.scale_factor,
            minNeighbors=self.config.min_neighbors,
            minSize=(self.config.min_size, self.config.min_size)
        )

        return [GraphicsItem.rectangle(int(x), int(y), int(w), int(h)) for (x, y, w, h) in faces]
