# app/domains/rpt/__init__.py

"""
FastAPI 애플리케이션의 'rpt' (Report) 도메인 패키지입니다.

이 패키지는 JasperReports 템플릿(.jrxml)과 보고서 데이터베이스(SQL Server)를 이용해
PDF/XLSX/DOCX/CSV 보고서를 생성합니다. 실제 렌더링은 외부 엔진(JasperStarter)이 수행하며,
이 패키지는 엔진 호출에 필요한 정보를 조립하고 결과 파일을 확인합니다.

주요 서브모듈:
- `schemas.py`: 출력 형식, 접속 정보, 호출 옵션 및 API 요청/응답 Pydantic 모델.
- `templates.py`: 보고서 이름 -> 템플릿 경로 변환, 템플릿 목록 조회.
- `connection.py`: JDBC 드라이버 확인 및 접속 정보(ConnectionDescriptor) 생성.
- `options.py`: 렌더링 엔진 호출 옵션(InvocationOptions) 생성.
- `renderer.py`: JasperStarter 실행 및 결과 파일 확인.
- `services.py`: 보고서 생성 파이프라인과 디렉토리/임시 파일 관리.
- `tasks.py`: ARQ 워커가 실행하는 주기 작업.
- `routers.py`: 보고서 생성 API 엔드포인트 정의.
"""


from . import exceptions, schemas, services  # noqa: F401

# 패키지 메타데이터
__title__ = "Jasper Reports Domain"
__description__ = "Generates business reports by driving JasperStarter against the report database."
__version__ = "0.1.0"
__all__ = ["exceptions", "schemas", "services"]
