"""커스텀 예외 클래스 정의"""


class FacemarkException(Exception):
    """기본 예외 클래스"""
    pass


class InvalidParameterError(FacemarkException):
    """잘못된 파라미터 또는 라이브러리 실패 예외"""
    pass


class InvalidImageError(InvalidParameterError):
    """잘못된 이미지 입력 예외"""
    pass


class ModelLoadError(InvalidParameterError):
    """모델 파일 로드 실패 예외"""
    pass


class NullPointerError(FacemarkException):
    """필수 입출력 객체 누락 예외"""
    pass


class ConfigurationError(FacemarkException):
    """설정 오류 예외"""
    pass
