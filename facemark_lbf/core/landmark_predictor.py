"""OpenCV FacemarkLBF 모델 어댑터"""

import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from ..config.constants import MODEL_FILENAME, MODEL_SUBDIR
from ..config.settings import ModelConfig
from ..models import FaceRegion
from ..utils.exceptions import InvalidParameterError, ModelLoadError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def conform_name(name: str) -> str:
    """파일 시스템용 이름 변환 (영숫자와 '_' 이외 문자는 '_'로 치환)"""
    return re.sub(r'[^A-Za-z0-9_]', '_', name)


def get_model_path(
    task_name: str,
    plugin_dir: Optional[str] = None,
    filename: Optional[str] = None
) -> Path:
    """
    플러그인 디렉토리 규칙에 따른 모델 파일 경로

    <plugin_dir>/<task_name>/Model/<filename>

    Args:
        task_name: 태스크 이름
        plugin_dir: 플러그인 루트 (None이면 config.yaml 값)
        filename: 모델 파일 이름 (None이면 config.yaml 값)

    Returns:
        모델 파일 경로
    """
    model_config = ModelConfig.from_config()
    root = Path(plugin_dir or model_config.plugin_dir)
    return root / conform_name(task_name) / MODEL_SUBDIR / (filename or model_config.filename or MODEL_FILENAME)


class LandmarkPredictor:
    """FacemarkLBF 모델 래퍼 (최초 사용 시 로드)"""

    def __init__(
        self,
        model_path: str,
        facemark_factory: Optional[Callable[[], Any]] = None
    ):
        """
        초기화

        Args:
            model_path: lbfmodel.yaml 경로
            facemark_factory: Facemark 인스턴스 생성 함수
                (None이면 cv2.face.createFacemarkLBF)
        """
        self.model_path = Path(model_path)
        self.facemark_factory = facemark_factory
        self._facemark = None

    @property
    def is_loaded(self) -> bool:
        return self._facemark is not None

    def load(self):
        """
        모델 로드 (이미 로드된 경우 무시)

        Raises:
            ModelLoadError: 모델 파일이 없거나 라이브러리 로드 실패
        """
        if self._facemark is not None:
            return

        if not self.model_path.exists():
            raise ModelLoadError(f"Model file not found: {self.model_path}")

        factory = self.facemark_factory
        if factory is None:
            if not hasattr(cv2, 'face'):
                raise ModelLoadError(
                    "cv2.face module is not available, install opencv-contrib-python"
                )
            factory = cv2.face.createFacemarkLBF

        try:
            facemark = factory()
            facemark.loadModel(str(self.model_path))
        except cv2.error as e:
            raise ModelLoadError(str(e))

        self._facemark = facemark
        logger.info(f"FacemarkLBF model loaded: {self.model_path}")

    def fit(
        self,
        image: np.ndarray,
        regions: Sequence[FaceRegion]
    ) -> Tuple[bool, List[np.ndarray]]:
        """
        얼굴 영역별 랜드마크 예측

        Args:
            image: 입력 이미지
            regions: 얼굴 영역 리스트

        Returns:
            (성공 여부, 얼굴별 (N, 2) float32 랜드마크 배열 리스트)

        Raises:
            InvalidParameterError: 모델 로드 또는 fit 중 라이브러리 오류
        """
        if not regions:
            logger.info("No face region to fit")
            return False, []

        self.load()

        faces = np.array([region.to_rect() for region in regions], dtype=np.int32)
        try:
            success, landmarks = self._facemark.fit(image, faces)
        except cv2.error as e:
            raise InvalidParameterError(str(e))

        if not success:
            logger.warning(f"FacemarkLBF fit failed for {len(regions)} face(s)")
            return False, []

        return True, [
            np.asarray(points, dtype=np.float32).reshape(-1, 2)
            for points in landmarks
        ]

    def get_model_info(self) -> Dict[str, Any]:
        """
        모델 정보 반환

        Returns:
            모델 경로 및 상태 정보
        """
        return {
            'model_path': str(self.model_path),
            'backend': 'OpenCV FacemarkLBF',
            'loaded': self.is_loaded,
        }
