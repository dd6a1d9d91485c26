# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 설정 객체 제공 (get_settings): 파이프라인 함수에 명시적으로 전달됩니다.
- 렌더링 엔진 제공 (get_renderer): 테스트에서는 dependency_overrides 로 교체합니다.
"""

from fastapi import Depends

from app.core.config import Settings, settings as app_settings
from app.domains.rpt.renderer import JasperStarterRenderer, ReportRenderer


def get_settings() -> Settings:
    """현재 애플리케이션 설정을 반환합니다."""
    return app_settings


def get_renderer(settings: Settings = Depends(get_settings)) -> ReportRenderer:
    """
    요청마다 JasperStarter 실행기를 새로 만들어 반환합니다.
    """
    return JasperStarterRenderer(settings.JASPERSTARTER_BIN)
