# app/core/config.py

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# 보고서 저장소 기본 경로 (storage/reports)
REPORTS_BASE_DIR = os.path.join(BASE_DIR, "storage", "reports")


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.

    보고서 파이프라인의 각 함수는 이 객체를 인자로 명시적으로 전달받습니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Jasper Reports API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Generates PDF/XLSX/DOCX/CSV business reports from JasperReports templates."
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드: 오류 응답에 실제 예외 메시지를 포함할지 여부
    DEBUG_MODE: bool = Field(False, description="Expose underlying error messages in API responses")
    # 보고서 렌더링 기본 로케일
    APP_LOCALE: str = Field("en", description="Default locale passed to the rendering engine")

    # --- 보고서 데이터베이스(SQL Server) 설정 ---
    DB_HOST: str = Field("127.0.0.1", description="Report database host")
    DB_PORT: int = Field(1433, description="Report database port")
    DB_DATABASE: str = Field("aalerpdb", description="Report database name")
    DB_USERNAME: str = Field("atdn", description="Report database user")
    DB_PASSWORD: SecretStr = Field(SecretStr("atdn"), description="Report database password")
    DB_DRIVER: str = Field("generic", description="JasperStarter database type (-t)")

    # --- JDBC 드라이버 설정 ---
    JDBC_DRIVER_CLASS: str = Field("com.microsoft.sqlserver.jdbc.SQLServerDriver", description="JDBC driver class name")
    JDBC_URL_SCHEME: str = Field("jdbc:sqlserver", description="JDBC URL scheme")
    JDBC_DIR: str = Field(
        os.path.join(BASE_DIR, "vendor", "jasperstarter", "jdbc"),
        description="Directory holding the JDBC driver jar",
    )
    JDBC_DRIVER_FILE: str = Field("mssql-jdbc-13.2.0.jre8.jar", description="Expected JDBC driver file name")
    JDBC_DRIVER_PATTERN: str = Field("mssql-jdbc-*.jar", description="Fallback glob for other driver versions")
    JDBC_DOWNLOAD_URL: str = Field(
        "https://docs.microsoft.com/en-us/sql/connect/jdbc/download-microsoft-jdbc-driver-for-sql-server",
        description="Where to obtain the JDBC driver",
    )

    # --- 렌더링 엔진 설정 ---
    JASPERSTARTER_BIN: str = Field("jasperstarter", description="JasperStarter executable")

    # --- 보고서 디렉토리 설정 ---
    REPORTS_DIR: str = Field(REPORTS_BASE_DIR, description="Directory holding report templates")
    TEMP_DIR: str = Field(os.path.join(REPORTS_BASE_DIR, "temp"), description="Directory for generated reports")
    RESOURCES_DIR: str = Field(os.path.join(REPORTS_BASE_DIR, "resources"), description="Directory for support resources")
    SUPPORT_RESOURCE_FILE: str = Field("moneyformatter.jar", description="Optional resource attached when present")
    TEMPLATE_EXTENSION: str = Field("jrxml", description="Template file extension")
    TEMP_FILE_RETENTION_HOURS: int = Field(24, description="Generated files older than this are swept")

    # --- ARQ 워커(Redis) 설정 ---
    REDIS_HOST: str = Field("localhost", description="Redis host for the ARQ worker")
    REDIS_PORT: int = Field(6379, description="Redis port for the ARQ worker")


settings = Settings()
