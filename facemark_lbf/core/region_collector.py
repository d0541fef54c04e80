"""상위 그래픽 주석에서 얼굴 영역 수집"""

from typing import Iterable, List, Optional

from ..models import FaceRegion, GraphicsItem
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def collect_face_regions(
    items: Optional[Iterable[GraphicsItem]],
    image_width: int,
    image_height: int
) -> List[FaceRegion]:
    """
    그래픽 주석을 얼굴 영역 리스트로 변환

    텍스트 주석은 제외하고, 바운딩 박스 전체가 이미지 안에 있는
    항목만 남긴다.

    Args:
        items: 상위 단계 그래픽 주석 (None 허용)
        image_width: 이미지 너비
        image_height: 이미지 높이

    Returns:
        FaceRegion 리스트
    """
    faces: List[FaceRegion] = []
    if items is None:
        return faces

    for item in items:
        if item.is_text_item():
            continue

        x, y, w, h = item.get_bounding_rect()
        region = FaceRegion(int(x), int(y), int(w), int(h))

        if region.is_inside(image_width, image_height):
            faces.append(region)
        else:
            logger.debug(f"Skipping box outside image: {region.to_rect()}")

    return faces
