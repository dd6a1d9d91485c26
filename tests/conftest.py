# tests/conftest.py

from pathlib import Path
from typing import AsyncGenerator, Callable, List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app
from app.core import dependencies as deps
from app.core.config import Settings
from app.domains.rpt import services as rpt_services
from app.domains.rpt.schemas import InvocationOptions

EXPECTED_DRIVER = "mssql-jdbc-13.2.0.jre8.jar"
FAKE_PDF = b"%PDF-1.4\n% fake report\n"


class FakeRenderer:
    """
    JasperStarter 대신 사용하는 테스트용 렌더러입니다.
    호출 인자를 기록하고, 설정에 따라 결과 파일을 만들거나 예외를 발생시킵니다.
    """

    def __init__(self):
        self.calls: List[Tuple[Path, Path, InvocationOptions]] = []
        self.output = ""
        self.write_artifact = True
        self.content = FAKE_PDF
        self.error: Optional[Exception] = None

    def process(self, template_path: Path, output_stem: Path, options: InvocationOptions) -> str:
        self.calls.append((template_path, output_stem, options))
        if self.error is not None:
            raise self.error
        if self.write_artifact:
            Path(f"{output_stem}.{options.output_format.value}").write_bytes(self.content)
        return self.output


# --- 설정 픽스처 ---
# 실제 storage/reports 대신 테스트마다 독립된 tmp_path 하위 디렉토리를 사용합니다.
@pytest.fixture(scope="function")
def report_settings(tmp_path: Path) -> Settings:
    """테스트 전용 디렉토리를 바라보는 Settings 객체를 반환합니다."""
    reports_dir = tmp_path / "reports"
    jdbc_dir = tmp_path / "jdbc"
    settings = Settings(
        _env_file=None,
        DEBUG_MODE=True,
        DB_HOST="db.example.local",
        DB_PORT=1433,
        DB_DATABASE="aalerpdb",
        DB_USERNAME="atdn",
        DB_PASSWORD="atdn",
        REPORTS_DIR=str(reports_dir),
        TEMP_DIR=str(reports_dir / "temp"),
        RESOURCES_DIR=str(reports_dir / "resources"),
        JDBC_DIR=str(jdbc_dir),
        JDBC_DRIVER_FILE=EXPECTED_DRIVER,
        JDBC_DRIVER_PATTERN="mssql-jdbc-*.jar",
        JASPERSTARTER_BIN=str(tmp_path / "bin" / "jasperstarter"),
    )
    rpt_services.ensure_report_directories(settings)
    jdbc_dir.mkdir()
    (jdbc_dir / EXPECTED_DRIVER).write_bytes(b"fake jar")
    return settings


@pytest.fixture(scope="function")
def template_factory(report_settings: Settings) -> Callable[[str], Path]:
    """REPORTS_DIR 에 빈 .jrxml 템플릿 파일을 만드는 팩토리 함수를 반환합니다."""
    def _create_template(name: str) -> Path:
        path = Path(report_settings.REPORTS_DIR) / f"{name}.{report_settings.TEMPLATE_EXTENSION}"
        path.write_text("<jasperReport/>", encoding="utf-8")
        return path
    return _create_template


@pytest.fixture(scope="function")
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


# --- API 클라이언트 픽스처 ---
# 설정과 렌더러 의존성을 테스트용으로 교체한 AsyncClient 를 반환합니다.
@pytest_asyncio.fixture(scope="function")
async def client(report_settings: Settings, fake_renderer: FakeRenderer) -> AsyncGenerator[AsyncClient, None]:
    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides.update({
            deps.get_settings: lambda: report_settings,
            deps.get_renderer: lambda: fake_renderer,
        })

        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as async_client:
            yield async_client
    finally:
        # 테스트가 끝난 후 원래 의존성 상태로 되돌립니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
