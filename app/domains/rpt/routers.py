# app/domains/rpt/routers.py

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, JSONResponse
from starlette.background import BackgroundTask

from app.core import dependencies as deps
from app.core.config import Settings
from . import schemas, services
from .exceptions import ReportError, TemplateNotFound
from .renderer import ReportRenderer
from .templates import list_available_templates

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Report Generation (보고서 생성)"],
    responses={404: {"description": "Report template not found"}},
)

MEDIA_TYPES = {
    schemas.OutputFormat.PDF: "application/pdf",
    schemas.OutputFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    schemas.OutputFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    schemas.OutputFormat.CSV: "text/csv",
}


def _error_response(exc: Exception, message: str, settings: Settings) -> JSONResponse:
    """파이프라인 예외를 {"success": false, ...} 형태의 JSON 응답으로 변환합니다."""
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, TemplateNotFound)
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    body = schemas.ErrorResponse(
        message=message,
        error=str(exc) if settings.DEBUG_MODE else "An error occurred",
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _download_response(report_path: Path, output_format: schemas.OutputFormat) -> FileResponse:
    """생성된 파일을 첨부파일로 내려보내고, 전송이 끝나면 삭제합니다."""
    return FileResponse(
        path=str(report_path),
        media_type=MEDIA_TYPES[output_format],
        filename=report_path.name,
        background=BackgroundTask(report_path.unlink, missing_ok=True),
    )


@router.post("/gross-with-vat", summary="부가세 포함 매출 보고서 다운로드")
async def generate_gross_with_vat_report(
    request_in: schemas.GrossWithVatRequest,
    settings: Settings = Depends(deps.get_settings),
    renderer: ReportRenderer = Depends(deps.get_renderer),
):
    """
    기간/거래처 조건으로 'gross_with_vat' 보고서를 생성해 다운로드합니다.
    """
    try:
        report_path = await run_in_threadpool(
            services.generate_report,
            settings,
            "gross_with_vat",
            request_in.to_params(request_in.customer_id),
            request_in.format,
            renderer,
        )
    except ReportError as e:
        logger.error("Gross VAT Report Generation Failed: %s", e, exc_info=True)
        return _error_response(e, "Failed to generate report", settings)

    return _download_response(report_path, request_in.format)


@router.post("/view", summary="PDF 보고서 미리보기")
async def view_report(
    request_in: schemas.ReportViewRequest,
    settings: Settings = Depends(deps.get_settings),
    renderer: ReportRenderer = Depends(deps.get_renderer),
):
    """
    보고서를 PDF 로 생성해 브라우저에서 바로 볼 수 있도록(inline) 반환합니다.
    생성된 파일은 정리 작업(cleanup)에서 삭제됩니다.
    """
    try:
        report_path = await run_in_threadpool(
            services.generate_report,
            settings,
            request_in.report_name,
            request_in.to_params(request_in.customer_id),
            schemas.OutputFormat.PDF,
            renderer,
        )
    except ReportError as e:
        logger.error("Report View Failed: %s", e)
        return _error_response(e, "Failed to view report", settings)

    return FileResponse(
        path=str(report_path),
        media_type=MEDIA_TYPES[schemas.OutputFormat.PDF],
        headers={"Content-Disposition": f'inline; filename="{report_path.name}"'},
    )


@router.post("/custom", summary="임의 파라미터 보고서 다운로드")
async def generate_custom_report(
    request_in: schemas.CustomReportRequest,
    settings: Settings = Depends(deps.get_settings),
    renderer: ReportRenderer = Depends(deps.get_renderer),
):
    """
    보고서 이름과 파라미터를 그대로 받아 보고서를 생성해 다운로드합니다.
    """
    try:
        report_path = await run_in_threadpool(
            services.generate_report,
            settings,
            request_in.report_name,
            request_in.params,
            request_in.format,
            renderer,
        )
    except ReportError as e:
        logger.error("Custom Report Generation Failed: %s", e)
        return _error_response(e, "Failed to generate custom report", settings)

    return _download_response(report_path, request_in.format)


@router.get("/templates", response_model=schemas.ReportListResponse, summary="보고서 템플릿 목록")
async def read_available_reports(settings: Settings = Depends(deps.get_settings)):
    """
    REPORTS_DIR 에 있는 보고서 템플릿 목록을 조회합니다.
    """
    try:
        templates = list_available_templates(settings)
    except OSError as e:
        logger.error("Failed to list reports: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=schemas.ErrorResponse(message="Failed to retrieve reports list", error=str(e)).model_dump(),
        )

    return schemas.ReportListResponse(
        reports=[schemas.ReportTemplateRead.from_template(t) for t in templates]
    )


@router.post("/cleanup", response_model=schemas.CleanupResponse, summary="임시 보고서 파일 정리")
async def cleanup_temp_files(settings: Settings = Depends(deps.get_settings)):
    """
    보존 기간이 지난 임시 보고서 파일을 삭제합니다. (스케줄러에서 주기적으로 호출)
    """
    try:
        deleted_count = await run_in_threadpool(services.cleanup_temp_files, settings)
    except OSError as e:
        logger.error("Temp file cleanup failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=schemas.ErrorResponse(message="Cleanup failed", error=str(e)).model_dump(),
        )

    return schemas.CleanupResponse(
        message=f"Cleaned up {deleted_count} temporary files",
        deleted_count=deleted_count,
    )


@router.get("/test-connection", response_model=schemas.ConnectionTestResponse, summary="보고서 DB 접속 테스트")
async def test_report_connection(
    settings: Settings = Depends(deps.get_settings),
    renderer: ReportRenderer = Depends(deps.get_renderer),
):
    """
    'SELECT 1' 테스트 보고서를 렌더링해 데이터베이스 접속 여부를 확인합니다.
    """
    try:
        config = await run_in_threadpool(services.check_connection, settings, renderer)
    except (ReportError, OSError) as e:
        logger.error("Connection test failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=schemas.ErrorResponse(message="Database connection failed", error=str(e)).model_dump(),
        )

    return schemas.ConnectionTestResponse(message="Database connection successful", config=config)
