"""랜드마크 렌더링 테스트"""

import numpy as np

from facemark_lbf.config.settings import VisualizationStyle
from facemark_lbf.models import DisplayType, GraphicsOutput
from facemark_lbf.processing.renderer import LandmarkRenderer, clip_triangles, draw_graphics_on_image
from test_landmark_predictor import make_face_landmarks


def face_68():
    return make_face_landmarks((20, 20, 120, 120)).reshape(-1, 2)


def test_points_one_per_landmark():
    output = GraphicsOutput()
    LandmarkRenderer.render(output, [face_68(), face_68()], DisplayType.POINTS, 200, 200)

    assert len(output.points) == 136
    assert output.polylines == []
    assert output.polygons == []


def test_face_68_draws_nine_shapes():
    landmarks = face_68()
    output = GraphicsOutput()
    LandmarkRenderer.draw_landmarks_face(output, landmarks)

    # 턱선, 좌/우 눈썹, 콧대는 열린 polyline
    assert [len(line) for line in output.polylines] == [17, 5, 5, 4]
    # 코 아래, 좌/우 눈, 바깥/안쪽 입술은 닫힌 polygon
    assert [len(poly) for poly in output.polygons] == [6, 6, 6, 12, 8]
    assert output.points == []

    jaw = output.polylines[0]
    assert jaw[0] == tuple(float(v) for v in landmarks[0])
    assert jaw[-1] == tuple(float(v) for v in landmarks[16])

    # 코 아래는 콧대 끝점(30)에서 시작
    lower_nose = output.polygons[0]
    assert lower_nose[0] == tuple(float(v) for v in landmarks[30])
    assert lower_nose[-1] == tuple(float(v) for v in landmarks[35])

    inner_lip = output.polygons[-1]
    assert inner_lip[0] == tuple(float(v) for v in landmarks[60])
    assert inner_lip[-1] == tuple(float(v) for v in landmarks[67])


def test_face_fallback_to_points():
    landmarks = make_face_landmarks((20, 20, 100, 100), num_points=5).reshape(-1, 2)
    output = GraphicsOutput()
    LandmarkRenderer.render(output, [landmarks], DisplayType.FACE, 200, 200)

    assert len(output.points) == 5
    assert output.polylines == []
    assert output.polygons == []


def test_clip_triangles_discards_outside_vertices():
    triangle_list = [
        (10.0, 10.0, 20.0, 10.0, 15.0, 20.0),     # 내부
        (-5.0, 10.0, 20.0, 10.0, 15.0, 20.0),     # x < 0
        (10.0, 10.0, 100.0, 10.0, 15.0, 20.0),    # x == width
        (10.0, 10.0, 99.6, 10.0, 15.0, 20.0),     # 반올림 후 x == width
        (10.0, 10.0, 20.0, 10.0, 15.0, 99.4),     # 반올림 후 y == 99
        (0.0, 0.0, 300.0, -300.0, 15.0, 20.0),    # 가상 외곽 정점
    ]

    triangles = clip_triangles(triangle_list, 100, 100)

    assert triangles == [
        [(10, 10), (20, 10), (15, 20)],
        [(10, 10), (20, 10), (15, 99)],
    ]


def test_delaunay_triangles_inside_image():
    width, height = 200, 180
    output = GraphicsOutput()
    LandmarkRenderer.render(output, [face_68()], DisplayType.DELAUNAY, width, height)

    assert len(output.polygons) > 0
    assert output.points == []
    for triangle in output.polygons:
        assert len(triangle) == 3
        for x, y in triangle:
            assert 0 <= x < width
            assert 0 <= y < height


def test_delaunay_skips_landmarks_outside_image():
    landmarks = np.array([[10, 10], [50, 10], [30, 40], [250, 250]], dtype=np.float32)
    output = GraphicsOutput()
    LandmarkRenderer.draw_delaunay(output, landmarks, 100, 100)

    assert len(output.polygons) == 1
    assert sorted(output.polygons[0]) == [(10.0, 10.0), (30.0, 40.0), (50.0, 10.0)]


def test_draw_graphics_on_image():
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    output = GraphicsOutput()
    output.add_point((50.0, 50.0))
    output.add_polyline([(10.0, 80.0), (90.0, 80.0)])

    style = VisualizationStyle(landmark_color=(0, 255, 0), connection_color=(255, 0, 0))
    canvas = draw_graphics_on_image(image, output, style, boxes=[(5, 5, 20, 20)])

    assert canvas.shape == image.shape
    assert image.sum() == 0
    assert tuple(canvas[50, 50]) == (0, 255, 0)
    assert tuple(canvas[80, 50]) == (255, 0, 0)
    assert tuple(canvas[5, 10]) == (0, 0, 255)
