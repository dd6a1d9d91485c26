# app/domains/rpt/exceptions.py

"""
보고서 생성 파이프라인에서 발생하는 예외 정의 모듈입니다.

파이프라인은 실패를 그대로 호출자에게 전달합니다 (재시도, 자동 복구 없음).
HTTP 상태 코드 및 응답 형식으로의 변환은 라우터가 담당합니다.
"""

from pathlib import Path
from typing import Optional, Union


class ReportError(Exception):
    """보고서 파이프라인 예외의 기본 클래스입니다."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


class TemplateNotFound(ReportError):
    """보고서 템플릿 파일이 존재하지 않을 때 발생합니다."""


class DriverNotFound(ReportError):
    """JDBC 드라이버 파일을 찾을 수 없을 때 발생합니다."""


class RenderFailed(ReportError):
    """렌더링 엔진 실행 자체가 실패했을 때 발생합니다."""


class ArtifactMissing(ReportError):
    """엔진 실행 후 결과 파일이 없거나 비어 있을 때 발생합니다."""
