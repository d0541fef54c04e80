"""사전 학습 LBF 모델 다운로드"""

import urllib.request
from pathlib import Path

from ..config.settings import ModelConfig
from .exceptions import ModelLoadError
from .logging_config import get_logger

logger = get_logger(__name__)


def download_model(model_path: Path, url: str = None, overwrite: bool = False) -> Path:
    """
    lbfmodel.yaml 다운로드

    Args:
        model_path: 저장할 경로
        url: 다운로드 URL (None이면 config.yaml 값)
        overwrite: 이미 존재해도 다시 받을지 여부

    Returns:
        모델 파일 경로

    Raises:
        ModelLoadError: URL이 없거나 다운로드 실패
    """
    model_path = Path(model_path)
    if model_path.exists() and not overwrite:
        logger.info(f"Model already exists: {model_path}")
        return model_path

    url = url or ModelConfig.from_config().url
    if not url:
        raise ModelLoadError("No model URL configured (model.url)")

    model_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = model_path.with_suffix(model_path.suffix + '.part')

    logger.info(f"Downloading {url} -> {model_path}")
    try:
        urllib.request.urlretrieve(url, tmp_path)
    except OSError as e:
        if tmp_path.exists():
            tmp_path.unlink()
        raise ModelLoadError(f"Failed to download model from {url}: {e}")

    tmp_path.replace(model_path)
    logger.info(f"Downloaded {model_path.name}")
    return model_path
