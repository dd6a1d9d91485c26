# tests/domains/__init__.py

"""
FastAPI 애플리케이션의 도메인별 테스트 스위트 패키지입니다.

- `test_rpt_pipeline_n.py`: 보고서 생성 파이프라인 단위 테스트.
- `test_rpt_n.py`: 'rpt' 도메인 API 엔드포인트 및 ARQ 태스크 통합 테스트.
"""

__title__ = "Jasper Reports Domain Tests"
__description__ = "Categorized tests for each business domain."
__version__ = "0.1.0"
__all__ = []
