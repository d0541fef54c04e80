"""FacemarkLBF 명령줄 도구 - 단일 이미지 또는 디렉토리 배치 처리"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import cv2

from .config.constants import FACIAL_REGIONS, NUM_FACE_LANDMARKS, TASK_NAME
from .config.settings import FacemarkLBFParam
from .core.face_detector import HaarFaceDetector
from .core.landmark_predictor import LandmarkPredictor, get_model_path
from .models import DisplayType, GraphicsInput, GraphicsItem
from .processing.factory import FacemarkLBFFactory
from .processing.renderer import draw_graphics_on_image
from .utils.exceptions import FacemarkException
from .utils.logging_config import get_logger
from .utils.model_download import download_model

logger = get_logger(__name__)

IMAGE_PATTERNS = ('*.png', '*.jpg', '*.jpeg', '*.bmp')


def parse_box(value: str) -> GraphicsItem:
    """'x,y,w,h' 문자열을 사각형 주석으로 변환"""
    try:
        x, y, w, h = (int(v) for v in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Box must be 'x,y,w,h', got '{value}'")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"Box width and height must be positive, got '{value}'")
    return GraphicsItem.rectangle(x, y, w, h)


def build_parser() -> argparse.ArgumentParser:
    default_display = DisplayType(FacemarkLBFParam.from_config().display_type)

    parser = argparse.ArgumentParser(
        prog='facemark-lbf',
        description='Facial landmark detection using OpenCV FacemarkLBF'
    )
    parser.add_argument('input', help='이미지 파일 또는 이미지 디렉토리')
    parser.add_argument(
        '--display',
        choices=[d.label.lower() for d in DisplayType],
        default=default_display.label.lower(),
        help=f'표시 모드 (기본: {default_display.label.lower()})'
    )
    parser.add_argument(
        '--box',
        type=parse_box,
        action='append',
        default=None,
        help='얼굴 박스 x,y,w,h (여러 번 지정 가능, 없으면 Haar cascade 검출)'
    )
    parser.add_argument('--model', default=None, help='lbfmodel.yaml 경로')
    parser.add_argument('--download', action='store_true', help='모델이 없으면 다운로드')
    parser.add_argument('--output', default='output', help='결과 저장 디렉토리 (기본: output)')
    parser.add_argument('--json', action='store_true', help='랜드마크 좌표를 JSON으로 저장')
    return parser


def collect_images(input_path: Path) -> List[Path]:
    """입력 경로에서 이미지 파일 목록 생성"""
    if input_path.is_dir():
        files = []
        for pattern in IMAGE_PATTERNS:
            files.extend(sorted(input_path.glob(pattern)))
        return files
    return [input_path]


def process_image(
    image_path: Path,
    param: FacemarkLBFParam,
    predictor: LandmarkPredictor,
    boxes: Optional[List[GraphicsItem]],
    detector: Optional[HaarFaceDetector],
    output_dir: Path
) -> Dict[str, Any]:
    """
    단일 이미지 처리 및 결과 저장

    Returns:
        결과 딕셔너리 (filename, success, faces, landmarks ...)
    """
    image = cv2.imread(str(image_path))
    if image is None:
        return {'filename': image_path.name, 'success': False, 'error': 'Failed to load image'}

    items = boxes if boxes is not None else detector.detect(image)

    task = FacemarkLBFFactory().create(param)
    task.predictor = predictor
    task.set_image(image)
    task.set_graphics(GraphicsInput(items))

    try:
        task.run()
    except FacemarkException as e:
        logger.error(f"{image_path.name}: {e}")
        return {'filename': image_path.name, 'success': False, 'error': str(e)}

    numeric = task.get_numeric_output()
    graphics = task.get_graphics_output()

    annotated = draw_graphics_on_image(image, graphics, boxes=[f.to_rect() for f in task.faces])
    output_path = output_dir / f"{image_path.stem}_landmarks.png"
    cv2.imwrite(str(output_path), annotated)

    result = {
        'filename': image_path.name,
        'success': bool(numeric.value_lists),
        'image_size': {'width': image.shape[1], 'height': image.shape[0]},
        'faces': [list(f.to_rect()) for f in task.faces],
        'output_image': str(output_path),
    }
    result.update(numeric.to_dict())
    result['graphics'] = graphics.to_dict()
    if numeric.value_lists and all(len(v) == NUM_FACE_LANDMARKS for v in numeric.value_lists):
        result['regions'] = FACIAL_REGIONS
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"❌ 입력 경로가 존재하지 않습니다: {input_path}")
        return 1

    model_path = Path(args.model) if args.model else get_model_path(TASK_NAME)
    if args.download:
        try:
            download_model(model_path)
        except FacemarkException as e:
            print(f"❌ 모델 다운로드 실패: {e}")
            return 1

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    param = FacemarkLBFParam(display_type=DisplayType.from_label(args.display).value)
    predictor = LandmarkPredictor(model_path)

    detector = None
    if args.box is None:
        try:
            detector = HaarFaceDetector()
        except FacemarkException as e:
            print(f"❌ 얼굴 검출기 초기화 실패: {e}")
            return 1

    image_files = collect_images(input_path)

    print("=" * 80)
    print(f"FacemarkLBF 랜드마크 검출 - {len(image_files)}개 이미지 ({args.display})")
    print("=" * 80)

    results = []
    for idx, image_path in enumerate(image_files, 1):
        result = process_image(image_path, param, predictor, args.box, detector, output_dir)
        results.append(result)

        if result['success']:
            print(f"[{idx}/{len(image_files)}] ✅ {image_path.name}: {result['num_faces']} face(s)")
        else:
            reason = result.get('error', 'No landmarks')
            print(f"[{idx}/{len(image_files)}] ❌ {image_path.name}: {reason}")

    if args.json:
        json_path = output_dir / 'landmarks.json'
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        print(f"📄 JSON 저장: {json_path}")

    success_count = sum(1 for r in results if r['success'])
    print(f"완료: {success_count}/{len(results)} 성공")
    return 0 if success_count == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
