# app/domains/rpt/services.py

"""
보고서 생성 파이프라인 및 관리(housekeeping) 서비스 모듈입니다.

파이프라인: 템플릿 확인 -> 호출 옵션 생성 -> 엔진 실행 -> 결과 파일 확인
모든 함수는 설정(Settings)을 인자로 받으며, 요청 간에 공유되는 상태가 없습니다.
"""

import logging
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.core.config import Settings
from app.utils import files
from .options import build_invocation_options
from .renderer import ReportRenderer, render_report, verify_artifact
from .schemas import OutputFormat, ReportParameters
from .templates import resolve_template

logger = logging.getLogger(__name__)

CONNECTION_TEST_NAME = "connection_test"

CONNECTION_TEST_JRXML = """<?xml version="1.0" encoding="UTF-8"?>
<jasperReport xmlns="http://jasperreports.sourceforge.net/jasperreports"
              xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
              xsi:schemaLocation="http://jasperreports.sourceforge.net/jasperreports
              http://jasperreports.sourceforge.net/xsd/jasperreport.xsd"
              name="connection_test" pageWidth="595" pageHeight="842"
              columnWidth="555" leftMargin="20" rightMargin="20"
              topMargin="20" bottomMargin="20">
    <queryString>
        <![CDATA[SELECT 1 as test]]>
    </queryString>
    <field name="test" class="java.lang.Integer"/>
    <title>
        <band height="50">
            <staticText>
                <reportElement x="0" y="0" width="200" height="30"/>
                <text><![CDATA[Connection Test Report]]></text>
            </staticText>
        </band>
    </title>
</jasperReport>
"""


def make_output_stem(settings: Settings, report_name: str, now: Optional[datetime] = None) -> Path:
    """
    결과 파일 경로 stem 을 만듭니다: <TEMP_DIR>/<report_name>_<YYYYmmddHHMMSS>_<8자리 hex>

    같은 보고서가 같은 초에 두 번 생성되어도 충돌하지 않도록 임의 접미사를 붙입니다.
    """
    timestamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    suffix = uuid.uuid4().hex[:8]
    return Path(settings.TEMP_DIR) / f"{report_name}_{timestamp}_{suffix}"


def generate_report(
    settings: Settings,
    report_name: str,
    params: Optional[ReportParameters],
    output_format: OutputFormat,
    renderer: ReportRenderer,
    locale: Optional[str] = None,
) -> Path:
    """
    보고서를 생성하고 결과 파일 경로를 반환합니다.

    Raises:
        TemplateNotFound: 템플릿 파일이 없는 경우 (엔진 실행 전)
        DriverNotFound: JDBC 드라이버가 없는 경우 (엔진 실행 전)
        RenderFailed: 엔진 실행이 실패한 경우
        ArtifactMissing: 엔진 실행 후 결과 파일이 없는 경우
    """
    output_format = OutputFormat(output_format)

    template_path = resolve_template(settings, report_name)
    options = build_invocation_options(settings, output_format, params, locale=locale)
    output_stem = make_output_stem(settings, report_name)

    try:
        artifact = render_report(renderer, template_path, output_stem, options)
        artifact = verify_artifact(artifact)
    except Exception as e:
        logger.error("JasperReport Process Error: %s", e)
        raise

    logger.info("Report generated successfully: %s", artifact)
    return artifact


# =============================================================================
# Housekeeping
# =============================================================================
def report_directories(settings: Settings) -> List[Path]:
    return [Path(settings.REPORTS_DIR), Path(settings.TEMP_DIR), Path(settings.RESOURCES_DIR)]


def ensure_report_directories(settings: Settings) -> List[Path]:
    """템플릿/임시/리소스 디렉토리를 만들고, 새로 만든 디렉토리 목록을 반환합니다."""
    return files.ensure_directories(report_directories(settings))


def cleanup_temp_files(settings: Settings, now: Optional[float] = None) -> int:
    """TEMP_DIR 에서 보존 기간(기본 24시간)이 지난 파일을 삭제하고 삭제 수를 반환합니다."""
    retention_seconds = settings.TEMP_FILE_RETENTION_HOURS * 3600
    deleted_count = files.delete_files_older_than(
        Path(settings.TEMP_DIR), retention_seconds, now=now
    )
    logger.info("Cleaned up %d temporary report files", deleted_count)
    return deleted_count


def check_connection(settings: Settings, renderer: ReportRenderer) -> Dict[str, Any]:
    """
    'SELECT 1' 만 수행하는 테스트 템플릿을 렌더링해 데이터베이스 접속을 확인합니다.

    테스트용 템플릿과 결과 파일은 성공/실패와 관계없이 삭제합니다.
    """
    temp_dir = Path(settings.TEMP_DIR)
    temp_dir.mkdir(parents=True, exist_ok=True)

    test_template = temp_dir / f"{CONNECTION_TEST_NAME}_{uuid.uuid4().hex[:8]}.{settings.TEMPLATE_EXTENSION}"
    output_stem = temp_dir / f"{CONNECTION_TEST_NAME}_{int(time.time())}_{uuid.uuid4().hex[:8]}"
    test_template.write_text(CONNECTION_TEST_JRXML, encoding="utf-8")

    artifact = Path(f"{output_stem}.{OutputFormat.PDF.value}")
    try:
        options = build_invocation_options(settings, OutputFormat.PDF)
        render_report(renderer, test_template, output_stem, options)
    finally:
        test_template.unlink(missing_ok=True)
        artifact.unlink(missing_ok=True)

    return {"host": settings.DB_HOST, "database": settings.DB_DATABASE}
