# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest` 와 `pytest-asyncio` 를 기반으로 작성되며,
비즈니스 도메인에 따라 하위 디렉토리로 구조화됩니다.

- `domains/`: 각 도메인(rpt)에 대한 단위/통합 테스트.
- `conftest.py`: 테스트 전용 설정, 가짜 렌더러, API 클라이언트 픽스처.
"""

__title__ = "Jasper Reports API Tests"
__description__ = "Test suite for the Jasper Reports FastAPI application."
__version__ = "0.1.0"
__all__ = []
