# app/domains/rpt/tasks.py

import logging
from typing import Any, Dict

from fastapi.concurrency import run_in_threadpool

from app.core.config import settings
from . import services
from .exceptions import ReportError
from .renderer import JasperStarterRenderer

#  로거 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def cleanup_temp_reports_task(ctx: Dict[str, Any]) -> Dict[str, Any]:
    """
    ARQ 워커에 의해 주기적으로 실행되는 임시 보고서 파일 정리 태스크.
    보존 기간이 지난 생성 파일을 삭제합니다.
    """
    logger.info("ARQ 태스크: 임시 보고서 파일 정리 작업 시작")
    deleted_count = await run_in_threadpool(services.cleanup_temp_files, settings)
    return {"status": "success", "message": "임시 파일 정리 완료", "deleted_count": deleted_count}


async def check_report_connection_task(ctx: Dict[str, Any]) -> Dict[str, Any]:
    """
    ARQ 워커에 의해 실행될 보고서 데이터베이스 접속 점검 태스크.
    테스트 보고서를 렌더링하고 결과를 반환합니다.
    """
    logger.info("ARQ 태스크: 보고서 데이터베이스 접속 점검 실행")
    renderer = JasperStarterRenderer(settings.JASPERSTARTER_BIN)
    try:
        config = await run_in_threadpool(services.check_connection, settings, renderer)
    except (ReportError, OSError) as e:
        logger.error("보고서 데이터베이스 접속 점검 실패: %s", e)
        return {"status": "failed", "message": str(e)}

    logger.info("보고서 데이터베이스 접속 점검 성공: %s", config)
    return {"status": "success", "message": "Database connection successful", "config": config}
