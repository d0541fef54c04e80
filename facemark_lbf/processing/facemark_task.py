"""FacemarkLBF 랜드마크 검출 태스크"""

import copy
from typing import Callable, List, Optional, Union

import cv2
import numpy as np

from ..config.constants import PROGRESS_STEPS, TASK_NAME
from ..config.settings import FacemarkLBFParam
from ..core.landmark_predictor import LandmarkPredictor, get_model_path
from ..core.region_collector import collect_face_regions
from ..models import (
    FaceRegion, GraphicsInput, GraphicsOutput, ImageIO, NumericOutput
)
from ..utils.exceptions import InvalidParameterError, NullPointerError
from ..utils.logging_config import get_logger
from .renderer import LandmarkRenderer

logger = get_logger(__name__)


class FacemarkLBFTask:
    """
    이미지 + 얼굴 박스 → 랜드마크 그래픽/수치 출력

    Inputs:
        0: ImageIO
        1: GraphicsInput (선택)

    Outputs:
        0: ImageIO (입력 이미지 전달)
        1: NumericOutput (얼굴별 랜드마크 좌표)
        2: GraphicsOutput (표시 모드별 그래픽)
    """

    def __init__(
        self,
        name: str = TASK_NAME,
        param: Optional[FacemarkLBFParam] = None,
        predictor: Optional[LandmarkPredictor] = None,
        progress_callback: Optional[Callable[[], None]] = None
    ):
        """
        초기화

        Args:
            name: 태스크 이름 (그래픽 레이어 이름 및 모델 디렉토리)
            param: 태스크 파라미터 (복사해서 보관)
            predictor: 랜드마크 예측기 (None이면 첫 실행 시 생성)
            progress_callback: 진행 단계마다 호출되는 함수
        """
        self.name = name
        self.param = copy.deepcopy(param) if param is not None else FacemarkLBFParam()
        self.predictor = predictor
        self.progress_callback = progress_callback

        self.inputs: List[Optional[Union[ImageIO, GraphicsInput]]] = [ImageIO(), GraphicsInput()]
        self.outputs = [ImageIO(), NumericOutput(), GraphicsOutput()]
        self.faces: List[FaceRegion] = []

    # 입출력 접근
    def get_input(self, index: int):
        return self.inputs[index] if index < len(self.inputs) else None

    def set_input(self, index: int, data):
        while len(self.inputs) <= index:
            self.inputs.append(None)
        self.inputs[index] = data

    def get_output(self, index: int):
        return self.outputs[index] if index < len(self.outputs) else None

    def get_output_count(self) -> int:
        return len(self.outputs)

    def set_image(self, image: np.ndarray):
        """입력 이미지 설정 (간편 함수)"""
        self.set_input(0, ImageIO(image))

    def set_graphics(self, graphics: Optional[GraphicsInput]):
        """입력 그래픽 주석 설정 (간편 함수)"""
        self.set_input(1, graphics)

    def get_graphics_output(self) -> GraphicsOutput:
        return self.get_output(self.get_output_count() - 1)

    def get_numeric_output(self) -> NumericOutput:
        return self.get_output(1)

    def get_progress_steps(self) -> int:
        return PROGRESS_STEPS

    def _emit_progress(self):
        if self.progress_callback is not None:
            self.progress_callback()

    def run(self):
        """
        태스크 실행

        이미지 형식(채널 수 등)은 검사하지 않고 그대로 fit에 전달하며,
        처리 중 발생한 cv2.error는 InvalidParameterError로 변환된다.

        Raises:
            InvalidParameterError: 입력 이미지/파라미터 오류, 모델 로드, fit 또는 렌더링 실패
            NullPointerError: 그래픽 출력이 없는 경우
        """
        image_input = self.get_input(0)
        if not isinstance(image_input, ImageIO) or not isinstance(self.param, FacemarkLBFParam):
            raise InvalidParameterError("Invalid parameters")

        if not image_input.is_data_available():
            raise InvalidParameterError("Empty image")

        image = image_input.get_image()
        self._emit_progress()

        # 이전 실행 결과 초기화
        self.get_numeric_output().clear_data()
        graphics_output = self.get_graphics_output()
        if graphics_output is not None:
            graphics_output.clear()

        if self.predictor is None:
            self.predictor = LandmarkPredictor(get_model_path(self.name))

        try:
            self.manage_input_graphics(image)
            success, landmarks = self.predictor.fit(image, self.faces)
            if success:
                self.manage_output(image, landmarks)
                logger.info(f"{len(landmarks)} face(s) processed")
        except cv2.error as e:
            raise InvalidParameterError(str(e))

        self._emit_progress()
        self.forward_input_image()
        self._emit_progress()

    def manage_input_graphics(self, image: np.ndarray):
        """입력 그래픽 주석에서 얼굴 영역 수집"""
        graphics_input = self.get_input(1)
        items = graphics_input.get_items() if isinstance(graphics_input, GraphicsInput) else None

        height, width = image.shape[:2]
        self.faces = collect_face_regions(items, width, height)

    def manage_output(self, image: np.ndarray, landmarks: List[np.ndarray]):
        """
        랜드마크를 그래픽 출력 및 수치 출력으로 변환

        Args:
            image: 입력 이미지
            landmarks: 얼굴별 (N, 2) 랜드마크 배열
        """
        graphics_output = self.get_graphics_output()
        if not isinstance(graphics_output, GraphicsOutput):
            raise NullPointerError("Invalid graphics output")

        graphics_output.set_new_layer(self.name)
        graphics_output.set_image_index(0)

        height, width = image.shape[:2]
        LandmarkRenderer.render(graphics_output, landmarks, self.param.display, width, height)

        numeric_output = self.get_numeric_output()
        if isinstance(numeric_output, NumericOutput):
            numeric_output.clear_data()
            for face_landmarks in landmarks:
                numeric_output.add_value_list(face_landmarks)

    def forward_input_image(self):
        """입력 이미지를 출력 0으로 전달"""
        self.get_output(0).set_image(self.get_input(0).get_image())
