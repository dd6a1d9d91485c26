# app/domains/rpt/options.py

from pathlib import Path
from typing import Optional

from app.core.config import Settings
from .connection import build_connection_descriptor
from .schemas import InvocationOptions, OutputFormat, ReportParameters


def find_support_resource(settings: Settings) -> Optional[Path]:
    """보조 리소스(moneyformatter.jar 등)가 있으면 경로를, 없으면 None 을 반환합니다."""
    resource_path = Path(settings.RESOURCES_DIR) / settings.SUPPORT_RESOURCE_FILE
    if resource_path.is_file():
        return resource_path
    return None


def build_invocation_options(
    settings: Settings,
    output_format: OutputFormat,
    params: Optional[ReportParameters] = None,
    locale: Optional[str] = None,
) -> InvocationOptions:
    """
    렌더링 엔진 호출 옵션을 만듭니다.

    - 보조 리소스는 파일이 있을 때만 추가합니다 (없어도 오류가 아님).
    - 접속 정보는 매번 새로 만듭니다. 드라이버가 없으면 여기서 DriverNotFound 가 발생합니다.
    """
    return InvocationOptions(
        formats=(OutputFormat(output_format),),
        locale=locale or settings.APP_LOCALE,
        params=dict(params or {}),
        resources=find_support_resource(settings),
        db_connection=build_connection_descriptor(settings),
    )
