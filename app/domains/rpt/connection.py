# app/domains/rpt/connection.py

"""
보고서 데이터베이스 접속 정보(ConnectionDescriptor)를 만드는 모듈입니다.

드라이버 배포 상태는 배포마다 달라질 수 있으므로, 접속 정보는 캐시하지 않고
호출될 때마다 드라이버 파일을 다시 확인합니다.
"""

import logging
from pathlib import Path

from app.core.config import Settings
from .exceptions import DriverNotFound
from .schemas import ConnectionDescriptor

logger = logging.getLogger(__name__)


def find_jdbc_driver(settings: Settings) -> Path:
    """
    JDBC_DIR 에서 JDBC 드라이버 jar 파일을 찾습니다.

    1. 정확한 파일명(JDBC_DRIVER_FILE)이 있으면 그대로 사용합니다.
    2. 없으면 JDBC_DRIVER_PATTERN 으로 검색해 같은 계열의 다른 버전을 허용합니다.
    3. 그래도 없으면 DriverNotFound 를 발생시킵니다.
    """
    jdbc_dir = Path(settings.JDBC_DIR)

    expected = jdbc_dir / settings.JDBC_DRIVER_FILE
    if expected.is_file():
        return expected

    candidates = sorted(p for p in jdbc_dir.glob(settings.JDBC_DRIVER_PATTERN) if p.is_file())
    if not candidates:
        raise DriverNotFound(
            f"SQL Server JDBC driver not found in: {jdbc_dir}\n"
            f"Please download from: {settings.JDBC_DOWNLOAD_URL}",
            path=jdbc_dir,
        )

    #  여러 버전이 있으면 이름순으로 가장 뒤의 것 (대체로 최신 버전)
    driver = candidates[-1]
    logger.info("Expected JDBC driver %s not found, using %s", expected.name, driver.name)
    return driver


def build_connection_descriptor(settings: Settings) -> ConnectionDescriptor:
    """설정값으로부터 새 ConnectionDescriptor 를 만듭니다."""
    driver_path = find_jdbc_driver(settings)

    return ConnectionDescriptor(
        driver=settings.DB_DRIVER,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
        database=settings.DB_DATABASE,
        username=settings.DB_USERNAME,
        password=settings.DB_PASSWORD,
        jdbc_driver=settings.JDBC_DRIVER_CLASS,
        jdbc_url_scheme=settings.JDBC_URL_SCHEME,
        jdbc_dir=Path(settings.JDBC_DIR),
        driver_path=driver_path,
    )
