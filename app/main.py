import logging
import shutil
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from arq.cron import cron
from arq.connections import RedisSettings
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 의존성 모듈 임포트
from app.core.config import settings, Settings
from app.core import dependencies as deps

from app import API_PREFIX

# 태스크 모듈 임포트
from app.domains.rpt import services as rpt_services
from app.domains.rpt import tasks as rpt_tasks

# 라우터 임포트
from app.domains.rpt.routers import router as rpt_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ARQ 워커가 실행할 태스크 함수 목록
worker_functions = [
    rpt_tasks.cleanup_temp_reports_task,
    rpt_tasks.check_report_connection_task,
]


# ARQ 워커 설정 클래스 (실행: arq app.main.ArqWorkerSettings)
class ArqWorkerSettings:
    redis_settings = RedisSettings(host=settings.REDIS_HOST, port=settings.REDIS_PORT)
    functions = worker_functions
    cron_jobs = [
        # 매시 정각: 보존 기간이 지난 임시 보고서 파일 삭제
        cron(rpt_tasks.cleanup_temp_reports_task, minute=0, timeout=600, keep_result=3600),
        # 매일 00:30: 보고서 데이터베이스 접속 점검
        cron(rpt_tasks.check_report_connection_task, hour=0, minute=30, timeout=300, keep_result=600),
    ]


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 시작 시 보고서 디렉토리(템플릿/임시/리소스)가 있는지 확인하고 없으면 생성합니다.
    """
    logger.info("FastAPI 애플리케이션 시작 중...")
    try:
        created = rpt_services.ensure_report_directories(settings)
        logger.info("보고서 디렉토리 확인 완료 (새로 생성: %d개)", len(created))
    except OSError as e:
        logger.error("애플리케이션 시작 중 오류 발생: %s", e)
        raise

    yield  # 애플리케이션 실행

    logger.info("FastAPI 애플리케이션 종료 중...")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan
)

# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
# 'allow_origins'는 운영 환경에서 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(rpt_router, prefix=f"{API_PREFIX}/rpt", tags=["Report Generation (보고서 생성)"])


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": "Welcome to Jasper Reports API. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of report directories and the rendering engine.")
async def health_check(settings: Settings = Depends(deps.get_settings)):
    """
    보고서 디렉토리와 렌더링 엔진(JasperStarter) 실행 파일이 준비되어 있는지 확인합니다.
    데이터베이스 접속까지 확인하려면 /api/v1/rpt/test-connection 을 사용합니다.
    """
    missing = [str(d) for d in rpt_services.report_directories(settings) if not d.is_dir()]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Report directories missing: {', '.join(missing)}"
        )

    if shutil.which(settings.JASPERSTARTER_BIN) is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Rendering engine not found: {settings.JASPERSTARTER_BIN}"
        )

    return {"status": "ok", "report_directories": "ready", "rendering_engine": "available"}


# -- Uvicorn 서버 직접 실행 (개발용) --
# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
