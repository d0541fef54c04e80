"""68점 랜드마크 인덱스 및 시스템 상수 정의"""

from typing import Dict, List, Tuple

# 기본 태스크 이름 (플러그인 디렉토리 이름과 동일)
TASK_NAME = "infer_facemark_lbf"

# 사전 학습 모델 파일
MODEL_FILENAME = "lbfmodel.yaml"
MODEL_SUBDIR = "Model"

# 68점 모델 랜드마크 개수
NUM_FACE_LANDMARKS = 68

# 68점 얼굴 윤곽 구성: (이름, 시작 인덱스, 끝 인덱스(포함), 닫힌 도형 여부)
FACE_68_POLYLINES: List[Tuple[str, int, int, bool]] = [
    ('jaw_line', 0, 16, False),
    ('left_eyebrow', 17, 21, False),
    ('right_eyebrow', 22, 26, False),
    ('nose_bridge', 27, 30, False),
    ('lower_nose', 30, 35, True),
    ('left_eye', 36, 41, True),
    ('right_eye', 42, 47, True),
    ('outer_lip', 48, 59, True),
    ('inner_lip', 60, 67, True),
]

# 영역별 인덱스 (JSON 출력용)
FACIAL_REGIONS: Dict[str, List[int]] = {
    name: list(range(start, end + 1))
    for name, start, end, _ in FACE_68_POLYLINES
}

# 태스크 진행 단계 수
PROGRESS_STEPS = 3
