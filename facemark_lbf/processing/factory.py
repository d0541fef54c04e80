"""태스크 팩토리 및 플러그인 메타데이터"""

from typing import Optional

from ..config.constants import TASK_NAME
from ..config.settings import FacemarkLBFParam
from ..models import TaskInfo
from .facemark_task import FacemarkLBFTask


class FacemarkLBFFactory:
    """FacemarkLBFTask 생성 팩토리"""

    def __init__(self):
        self.info = TaskInfo(
            name=TASK_NAME,
            short_description="Facial landmark detection using Local Binary Features (LBF)",
            description=(
                "The locations of the fiducial facial landmark points around facial components and "
                "facial contour capture the rigid and non-rigid facial deformations due to head "
                "movements and facial expressions. They are hence important for various facial "
                "analysis tasks."
            ),
            path="Plugins/Python/Face/Landmarks",
            icon_path="Icon/icon.png",
            keywords="face,facial,landmark",
            authors="Ren S, Cao X, Wei Y, Sun J.",
            article="Face alignment at 3000 fps via regressing local binary features",
            journal="CVPR",
            year=2014,
            doc_link="https://docs.opencv.org/3.4.3/dc/d63/classcv_1_1face_1_1FacemarkLBF.html",
            license="3-clause BSD License",
            repo="https://github.com/opencv/opencv",
            version="1.0.0",
        )

    def create(self, param: Optional[FacemarkLBFParam] = None) -> FacemarkLBFTask:
        """
        태스크 생성

        Args:
            param: 태스크 파라미터 (None 또는 다른 타입이면 기본값)

        Returns:
            FacemarkLBFTask 인스턴스
        """
        if not isinstance(param, FacemarkLBFParam):
            param = FacemarkLBFParam()
        return FacemarkLBFTask(self.info.name, param)
