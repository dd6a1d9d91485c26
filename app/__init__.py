# app/__init__.py

"""
Jasper Reports API 애플리케이션의 메인 패키지입니다.

이 패키지는 FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정과 의존성 주입을 담는 core 서브패키지,
보고서 생성 도메인을 담는 domains 서브패키지로 구성됩니다.
"""

# 패키지 레벨에서 사용할 수 있는 공통 상수
APP_NAME = "Jasper Reports API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)


# PEP 440 (Version Identification and Dependency Specification)을 따르는 버전 정보
__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Business report generation API backed by JasperReports."
__license__ = "MIT"
__all__ = []
