# app/domains/rpt/templates.py

"""
보고서 템플릿(.jrxml) 조회 모듈입니다.

템플릿은 외부에서 작성되어 REPORTS_DIR 에 배치되며, 요청 시점에 탐색됩니다.
"""

from datetime import datetime
from pathlib import Path
from typing import List

from app.core.config import Settings
from .exceptions import TemplateNotFound
from .schemas import ReportTemplate


def _is_plain_name(report_name: str) -> bool:
    if not report_name or report_name in (".", ".."):
        return False
    return "/" not in report_name and "\\" not in report_name


def resolve_template(settings: Settings, report_name: str) -> Path:
    """
    보고서 이름을 템플릿 파일 경로로 변환합니다.

    경로가 아닌 '이름'만 받습니다. 구분자가 들어간 이름은 존재하지 않는 템플릿으로 취급합니다.
    """
    filename = f"{report_name}.{settings.TEMPLATE_EXTENSION}"
    template_path = Path(settings.REPORTS_DIR) / filename

    if not _is_plain_name(report_name):
        raise TemplateNotFound(f"Report template not found: {filename}", path=template_path)
    try:
        exists = template_path.is_file()
    except OSError as e:
        # 파일 이름이 너무 긴 경우(ENAMETOOLONG) 등
        raise TemplateNotFound(f"Report template not found: {filename} ({e.strerror})", path=template_path) from e
    if not exists:
        raise TemplateNotFound(f"Report template not found: {filename}", path=template_path)

    return template_path


def list_available_templates(settings: Settings) -> List[ReportTemplate]:
    """REPORTS_DIR 의 템플릿 목록을 이름순으로 반환합니다."""
    reports_dir = Path(settings.REPORTS_DIR)
    if not reports_dir.is_dir():
        return []

    templates = []
    for path in sorted(reports_dir.glob(f"*.{settings.TEMPLATE_EXTENSION}")):
        if not path.is_file():
            continue
        templates.append(
            ReportTemplate(
                name=path.stem,
                path=path,
                modified=datetime.fromtimestamp(path.stat().st_mtime),
            )
        )
    return templates
