"""랜드마크를 그래픽 출력으로 변환"""

from typing import Iterable, List, Sequence, Tuple

import cv2
import numpy as np

from ..config.constants import FACE_68_POLYLINES, NUM_FACE_LANDMARKS
from ..config.settings import VisualizationStyle
from ..models import DisplayType, GraphicsOutput, Point2f
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def _contains(width: int, height: int, point: Tuple[int, int]) -> bool:
    """(0, 0, width, height) 사각형 포함 여부 (cv::Rect::contains 규칙)"""
    x, y = point
    return 0 <= x < width and 0 <= y < height


def clip_triangles(
    triangle_list: Iterable[Sequence[float]],
    width: int,
    height: int
) -> List[List[Tuple[int, int]]]:
    """
    이미지 영역 안에 완전히 들어오는 삼각형만 남김

    Args:
        triangle_list: Subdiv2D.getTriangleList() 결과 (x1, y1, x2, y2, x3, y3)
        width: 이미지 너비
        height: 이미지 높이

    Returns:
        정수 좌표 삼각형 리스트
    """
    triangles = []
    for t in triangle_list:
        vertices = [
            (int(round(t[0])), int(round(t[1]))),
            (int(round(t[2])), int(round(t[3]))),
            (int(round(t[4])), int(round(t[5]))),
        ]
        if all(_contains(width, height, v) for v in vertices):
            triangles.append(vertices)
    return triangles


class LandmarkRenderer:
    """표시 모드별 랜드마크 그래픽 생성"""

    @staticmethod
    def draw_polyline(
        output: GraphicsOutput,
        landmarks: np.ndarray,
        start: int,
        end: int,
        is_closed: bool = False
    ):
        """
        start ~ end (포함) 인덱스의 점을 연결

        Args:
            output: 그래픽 출력
            landmarks: (N, 2) 랜드마크 배열
            start: 시작 인덱스
            end: 끝 인덱스 (포함)
            is_closed: True면 polygon, False면 polyline
        """
        points = [(float(x), float(y)) for x, y in landmarks[start:end + 1]]
        if is_closed:
            output.add_polygon(points)
        else:
            output.add_polyline(points)

    @staticmethod
    def draw_landmarks_point(output: GraphicsOutput, landmarks: np.ndarray):
        """랜드마크당 점 하나"""
        for x, y in landmarks:
            output.add_point((float(x), float(y)))

    @staticmethod
    def draw_landmarks_face(output: GraphicsOutput, landmarks: np.ndarray):
        """
        68점 모델 얼굴 윤곽 그리기

        68점이 아니면 어떤 점이 어떤 부위인지 알 수 없으므로
        점 표시로 대체한다.
        """
        if len(landmarks) != NUM_FACE_LANDMARKS:
            LandmarkRenderer.draw_landmarks_point(output, landmarks)
            return

        for _, start, end, is_closed in FACE_68_POLYLINES:
            LandmarkRenderer.draw_polyline(output, landmarks, start, end, is_closed)

    @staticmethod
    def draw_delaunay(
        output: GraphicsOutput,
        landmarks: np.ndarray,
        width: int,
        height: int
    ):
        """
        랜드마크 Delaunay 삼각분할 그리기

        이미지 밖의 랜드마크는 삽입하지 않고 건너뛴다. cv2.Subdiv2D.insert는
        영역 밖의 점에 대해 cv2.error를 발생시키지만, 여기서는 나머지 점으로
        삼각분할을 계속한다.

        Args:
            output: 그래픽 출력
            landmarks: (N, 2) 랜드마크 배열
            width: 이미지 너비
            height: 이미지 높이
        """
        subdiv = cv2.Subdiv2D((0, 0, width, height))

        for x, y in landmarks:
            # Subdiv2D는 영역 밖의 점을 거부함
            if not (0 <= x < width and 0 <= y < height):
                logger.debug(f"Landmark outside image skipped: ({x:.1f}, {y:.1f})")
                continue
            subdiv.insert((float(x), float(y)))

        for triangle in clip_triangles(subdiv.getTriangleList(), width, height):
            output.add_polygon(triangle)

    @staticmethod
    def render(
        output: GraphicsOutput,
        landmarks: List[np.ndarray],
        display_type: DisplayType,
        width: int,
        height: int
    ):
        """
        표시 모드에 따라 모든 얼굴의 랜드마크 렌더링

        Args:
            output: 그래픽 출력
            landmarks: 얼굴별 (N, 2) 랜드마크 배열 리스트
            display_type: 표시 모드
            width: 이미지 너비
            height: 이미지 높이
        """
        for face_landmarks in landmarks:
            if display_type == DisplayType.POINTS:
                LandmarkRenderer.draw_landmarks_point(output, face_landmarks)
            elif display_type == DisplayType.FACE:
                LandmarkRenderer.draw_landmarks_face(output, face_landmarks)
            elif display_type == DisplayType.DELAUNAY:
                LandmarkRenderer.draw_delaunay(output, face_landmarks, width, height)


def _to_int_points(points: List[Point2f]) -> np.ndarray:
    return np.array([[int(round(x)), int(round(y))] for x, y in points], dtype=np.int32)


def draw_graphics_on_image(
    image: np.ndarray,
    graphics: GraphicsOutput,
    style: VisualizationStyle = None,
    boxes: Iterable[Tuple[int, int, int, int]] = ()
) -> np.ndarray:
    """
    그래픽 출력을 이미지 위에 그리기 (CLI 결과 저장용)

    Args:
        image: BGR 이미지
        graphics: 그래픽 출력
        style: 시각화 스타일 (None이면 config.yaml 값)
        boxes: 함께 표시할 얼굴 박스 (x, y, w, h)

    Returns:
        주석이 그려진 이미지 복사본
    """
    style = style or VisualizationStyle.from_config()
    canvas = image.copy()
    if canvas.ndim == 2:
        canvas = cv2.cvtColor(canvas, cv2.COLOR_GRAY2BGR)

    for x, y, w, h in boxes:
        cv2.rectangle(canvas, (x, y), (x + w, y + h), style.bbox_color, style.bbox_thickness)

    for line in graphics.polylines:
        cv2.polylines(canvas, [_to_int_points(line)], False,
                      style.connection_color, style.connection_thickness)

    for polygon in graphics.polygons:
        cv2.polylines(canvas, [_to_int_points(polygon)], True,
                      style.connection_color, style.connection_thickness)

    for x, y in graphics.points:
        cv2.circle(canvas, (int(round(x)), int(round(y))), style.landmark_radius,
                   style.landmark_color, style.landmark_thickness)

    return canvas
