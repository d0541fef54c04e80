"""데이터 모델 정의"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

Point2f = Tuple[float, float]


class DisplayType(Enum):
    """랜드마크 표시 모드"""
    POINTS = 0      # 랜드마크당 점 하나
    FACE = 1        # 68점 얼굴 윤곽 (polyline/polygon)
    DELAUNAY = 2    # Delaunay 삼각분할

    @property
    def label(self) -> str:
        """UI 표시 라벨"""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> 'DisplayType':
        """라벨 문자열 ('points', 'Face' ...)에서 변환"""
        try:
            return cls[label.upper()]
        except KeyError:
            available = ', '.join(d.label for d in cls)
            raise ValueError(f"Unknown display type '{label}'. Available: {available}")


class GraphicsItemType(Enum):
    """상위 단계 그래픽 주석 종류"""
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    POINT = "point"
    TEXT = "text"


@dataclass
class FaceRegion:
    """얼굴 영역 (픽셀 좌표, 축 정렬 사각형)"""

    x: int
    y: int
    width: int
    height: int

    def is_inside(self, image_width: int, image_height: int) -> bool:
        """바운딩 박스 전체가 이미지 영역 안에 있는지 확인"""
        return (
            self.x >= 0 and self.y >= 0
            and self.x + self.width < image_width
            and self.y + self.height < image_height
        )

    def to_rect(self) -> Tuple[int, int, int, int]:
        """fit() 입력용 (x, y, w, h) 튜플"""
        return (self.x, self.y, self.width, self.height)


@dataclass
class GraphicsItem:
    """상위 단계 그래픽 주석 (바운딩 사각형 기준)"""

    item_type: GraphicsItemType
    x: float
    y: float
    width: float
    height: float
    text: Optional[str] = None

    def is_text_item(self) -> bool:
        return self.item_type == GraphicsItemType.TEXT

    def get_bounding_rect(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def rectangle(cls, x: float, y: float, width: float, height: float) -> 'GraphicsItem':
        return cls(GraphicsItemType.RECTANGLE, x, y, width, height)


@dataclass
class GraphicsInput:
    """그래픽 주석 입력"""

    items: List[GraphicsItem] = field(default_factory=list)

    def get_items(self) -> List[GraphicsItem]:
        return list(self.items)


@dataclass
class ImageIO:
    """이미지 입력/출력"""

    image: Optional[np.ndarray] = None

    def is_data_available(self) -> bool:
        return self.image is not None and self.image.size > 0

    def get_image(self) -> Optional[np.ndarray]:
        return self.image

    def set_image(self, image: Optional[np.ndarray]):
        self.image = image


@dataclass
class GraphicsOutput:
    """그래픽 출력 레이어 (점, polyline, polygon)"""

    layer_name: str = ""
    image_index: int = 0
    points: List[Point2f] = field(default_factory=list)
    polylines: List[List[Point2f]] = field(default_factory=list)
    polygons: List[List[Point2f]] = field(default_factory=list)

    def set_new_layer(self, name: str):
        """새 레이어 시작 (기존 항목 삭제)"""
        self.layer_name = name
        self.clear()

    def set_image_index(self, index: int):
        self.image_index = index

    def add_point(self, point: Point2f):
        self.points.append((float(point[0]), float(point[1])))

    def add_polyline(self, points: List[Point2f]):
        self.polylines.append([(float(x), float(y)) for x, y in points])

    def add_polygon(self, points: List[Point2f]):
        self.polygons.append([(float(x), float(y)) for x, y in points])

    def clear(self):
        self.points.clear()
        self.polylines.clear()
        self.polygons.clear()

    def is_empty(self) -> bool:
        return not (self.points or self.polylines or self.polygons)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'layer': self.layer_name,
            'image_index': self.image_index,
            'points': [list(p) for p in self.points],
            'polylines': [[list(p) for p in line] for line in self.polylines],
            'polygons': [[list(p) for p in poly] for poly in self.polygons],
        }


@dataclass
class NumericOutput:
    """얼굴별 랜드마크 좌표 리스트 출력"""

    value_lists: List[List[Point2f]] = field(default_factory=list)

    def clear_data(self):
        self.value_lists.clear()

    def add_value_list(self, values):
        self.value_lists.append([(float(x), float(y)) for x, y in values])

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'num_faces': len(self.value_lists),
            'landmarks': [[list(p) for p in values] for values in self.value_lists],
        }


@dataclass
class TaskInfo:
    """태스크 메타데이터"""

    name: str
    short_description: str = ""
    description: str = ""
    path: str = ""
    icon_path: str = ""
    keywords: str = ""
    authors: str = ""
    article: str = ""
    journal: str = ""
    year: int = 0
    doc_link: str = ""
    license: str = ""
    repo: str = ""
    version: str = ""
