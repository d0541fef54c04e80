"""LandmarkPredictor 테스트 (Facemark 스텁 사용)"""

from pathlib import Path

import cv2
import numpy as np
import pytest

from facemark_lbf.core.landmark_predictor import LandmarkPredictor, conform_name, get_model_path
from facemark_lbf.models import FaceRegion
from facemark_lbf.utils.exceptions import InvalidParameterError, ModelLoadError


def make_face_landmarks(face, num_points=68):
    """박스 안에 격자 형태로 배치된 가짜 랜드마크 (1, N, 2)"""
    x, y, w, h = face
    points = [
        (x + (i % 10 + 1) * w / 12.0, y + (i // 10 + 1) * h / 9.0)
        for i in range(num_points)
    ]
    return np.array(points, dtype=np.float32).reshape(1, num_points, 2)


class FakeFacemark:
    """cv2.face.FacemarkLBF 대체 스텁"""

    def __init__(self, num_points=68, success=True, fit_error=None, load_error=None):
        self.num_points = num_points
        self.success = success
        self.fit_error = fit_error
        self.load_error = load_error
        self.loaded_path = None
        self.fit_calls = 0

    def loadModel(self, path):
        if self.load_error:
            raise cv2.error(self.load_error)
        self.loaded_path = path

    def fit(self, image, faces):
        self.fit_calls += 1
        if self.fit_error:
            raise cv2.error(self.fit_error)
        landmarks = tuple(make_face_landmarks(face, self.num_points) for face in faces)
        return self.success, landmarks


class FakeFactory:
    """생성 횟수를 기록하는 팩토리"""

    def __init__(self, facemark):
        self.facemark = facemark
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.facemark


def make_model_file(tmp_path):
    model_path = tmp_path / "lbfmodel.yaml"
    model_path.write_text("dummy")
    return model_path


def test_lazy_load_and_cache(tmp_path):
    """최초 fit 시 한 번만 로드"""
    factory = FakeFactory(FakeFacemark())
    predictor = LandmarkPredictor(make_model_file(tmp_path), facemark_factory=factory)
    image = np.zeros((200, 200, 3), dtype=np.uint8)
    regions = [FaceRegion(10, 10, 100, 100)]

    assert not predictor.is_loaded

    predictor.fit(image, regions)
    predictor.fit(image, regions)

    assert predictor.is_loaded
    assert factory.calls == 1
    assert factory.facemark.loaded_path == str(tmp_path / "lbfmodel.yaml")
    assert factory.facemark.fit_calls == 2


def test_fit_returns_one_array_per_region(tmp_path):
    predictor = LandmarkPredictor(make_model_file(tmp_path), facemark_factory=FakeFactory(FakeFacemark()))
    image = np.zeros((300, 300, 3), dtype=np.uint8)
    regions = [FaceRegion(10, 10, 100, 100), FaceRegion(150, 150, 100, 100)]

    success, landmarks = predictor.fit(image, regions)

    assert success
    assert len(landmarks) == 2
    for face_landmarks in landmarks:
        assert face_landmarks.shape == (68, 2)
        assert face_landmarks.dtype == np.float32


def test_empty_regions_skip_library(tmp_path):
    facemark = FakeFacemark()
    predictor = LandmarkPredictor(make_model_file(tmp_path), facemark_factory=FakeFactory(facemark))

    success, landmarks = predictor.fit(np.zeros((50, 50, 3), dtype=np.uint8), [])

    assert success is False
    assert landmarks == []
    assert facemark.fit_calls == 0
    assert not predictor.is_loaded


def test_fit_failure_returns_no_landmarks(tmp_path):
    predictor = LandmarkPredictor(
        make_model_file(tmp_path),
        facemark_factory=FakeFactory(FakeFacemark(success=False))
    )

    success, landmarks = predictor.fit(np.zeros((200, 200, 3), dtype=np.uint8), [FaceRegion(10, 10, 50, 50)])

    assert success is False
    assert landmarks == []


def test_library_error_is_reported_as_invalid_parameter(tmp_path):
    predictor = LandmarkPredictor(
        make_model_file(tmp_path),
        facemark_factory=FakeFactory(FakeFacemark(fit_error="fit exploded"))
    )

    with pytest.raises(InvalidParameterError, match="fit exploded"):
        predictor.fit(np.zeros((200, 200, 3), dtype=np.uint8), [FaceRegion(10, 10, 50, 50)])


def test_load_error_is_reported(tmp_path):
    predictor = LandmarkPredictor(
        make_model_file(tmp_path),
        facemark_factory=FakeFactory(FakeFacemark(load_error="bad model"))
    )

    with pytest.raises(ModelLoadError, match="bad model"):
        predictor.load()
    assert not predictor.is_loaded


def test_missing_model_file(tmp_path):
    predictor = LandmarkPredictor(tmp_path / "missing.yaml", facemark_factory=FakeFactory(FakeFacemark()))

    with pytest.raises(ModelLoadError):
        predictor.fit(np.zeros((200, 200, 3), dtype=np.uint8), [FaceRegion(10, 10, 50, 50)])

    # ModelLoadError는 InvalidParameterError의 하위 클래스
    assert issubclass(ModelLoadError, InvalidParameterError)


def test_model_path_convention():
    assert conform_name("infer facemark-lbf") == "infer_facemark_lbf"
    assert get_model_path("infer_facemark_lbf", plugin_dir="/plugins") == \
        Path("/plugins/infer_facemark_lbf/Model/lbfmodel.yaml")


def test_model_info(tmp_path):
    predictor = LandmarkPredictor(make_model_file(tmp_path), facemark_factory=FakeFactory(FakeFacemark()))
    info = predictor.get_model_info()

    assert info['backend'] == 'OpenCV FacemarkLBF'
    assert info['loaded'] is False
    assert info['model_path'].endswith("lbfmodel.yaml")
