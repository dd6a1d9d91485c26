# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Jasper Reports API Core"
__description__ = "Core components for the Jasper Reports FastAPI application."
__version__ = "0.1.0"
__all__ = []
