"""입력 검증 유틸리티 함수"""

import numpy as np

from .exceptions import InvalidImageError, InvalidParameterError


def validate_image(image: np.ndarray) -> None:
    """
    이미지 유효성 검증

    Args:
        image: 검증할 이미지 (numpy array)

    Raises:
        InvalidImageError: 이미지가 유효하지 않은 경우
    """
    if image is None:
        raise InvalidImageError("Empty image")

    if not isinstance(image, np.ndarray):
        raise InvalidImageError(f"Image must be numpy.ndarray, got {type(image)}")

    if image.size == 0:
        raise InvalidImageError("Empty image")

    if len(image.shape) not in [2, 3]:
        raise InvalidImageError(f"Image must be 2D or 3D, got shape {image.shape}")

    if len(image.shape) == 3 and image.shape[2] not in [1, 3, 4]:
        raise InvalidImageError(f"Image channels must be 1, 3, or 4, got {image.shape[2]}")


def validate_display_type(display_type: int) -> None:
    """표시 모드 값 검증 (0: Points, 1: Face, 2: Delaunay)"""
    if not isinstance(display_type, int) or isinstance(display_type, bool):
        raise InvalidParameterError(f"display_type must be int, got {type(display_type).__name__}")
    if not 0 <= display_type <= 2:
        raise InvalidParameterError(f"display_type must be 0, 1, or 2, got {display_type}")
