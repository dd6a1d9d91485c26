# app/domains/rpt/schemas.py

import enum
from datetime import date, datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel, ConfigDict, Field, SecretStr, computed_field, field_serializer, field_validator, model_validator,
)

# 보고서 이름: 경로 구분자나 '..' 이 들어갈 수 없도록 영문/숫자/밑줄/하이픈만 허용합니다.
REPORT_NAME_PATTERN = r"^[A-Za-z0-9_\-]+$"
# 결과 파일 이름(<이름>_<시각>_<접미사>.<형식>)이 파일 시스템 한도(255바이트)를 넘지 않는 길이
REPORT_NAME_MAX_LENGTH = 200

ParameterValue = Union[str, int, float, bool, date, datetime, None]
ReportParameters = Dict[str, ParameterValue]


class OutputFormat(str, enum.Enum):
    """렌더링 엔진이 생성할 수 있는 출력 형식"""
    PDF = "pdf"
    XLSX = "xlsx"
    DOCX = "docx"
    CSV = "csv"


# =============================================================================
# 파이프라인 내부 값 객체
# =============================================================================
class ReportTemplate(BaseModel):
    """
    디스크에 존재하는 보고서 템플릿(.jrxml) 정보입니다.
    """
    name: str = Field(..., description="보고서 이름 (확장자 제외)")
    path: Path = Field(..., description="템플릿 파일의 전체 경로")
    modified: datetime = Field(..., description="마지막 수정 시각")


class ConnectionDescriptor(BaseModel):
    """
    렌더링 엔진이 보고서 데이터베이스에 접속하기 위한 정보입니다.

    jdbc_url 은 host/port/database 로부터만 계산되며, 직접 지정할 수 없습니다.
    """
    model_config = ConfigDict(frozen=True)

    driver: str = "generic"
    host: str
    port: int
    database: str
    username: str
    password: SecretStr
    jdbc_driver: str
    jdbc_url_scheme: str = "jdbc:sqlserver"
    jdbc_dir: Path
    driver_path: Path

    @computed_field
    @property
    def jdbc_url(self) -> str:
        return (
            f"{self.jdbc_url_scheme}://{self.host}:{self.port};"
            f"databaseName={self.database};encrypt=true;trustServerCertificate=true"
        )


class InvocationOptions(BaseModel):
    """
    렌더링 엔진 1회 호출에 필요한 옵션 묶음입니다. 호출마다 새로 생성됩니다.

    params 는 복사본을 읽기 전용 매핑으로 보관하므로 엔진에 전달된 뒤에도 바뀌지 않습니다.
    """
    model_config = ConfigDict(frozen=True)

    formats: Tuple[OutputFormat] = Field(..., description="출력 형식 (항상 1개)")
    locale: str
    params: Mapping[str, ParameterValue] = Field(default_factory=dict)
    resources: Optional[Path] = None
    db_connection: ConnectionDescriptor

    @field_validator("params", mode="after")
    @classmethod
    def freeze_params(cls, value: Mapping[str, ParameterValue]) -> Mapping[str, ParameterValue]:
        return MappingProxyType(dict(value))

    @field_serializer("params")
    def serialize_params(self, value: Mapping[str, ParameterValue]) -> ReportParameters:
        return dict(value)

    @property
    def output_format(self) -> OutputFormat:
        return self.formats[0]


# =============================================================================
# API 요청 스키마
# =============================================================================
class DateRangeRequest(BaseModel):
    """조회 기간을 포함하는 요청의 공통 부모 스키마입니다."""
    from_date: date = Field(..., description="조회 시작일")
    to_date: date = Field(..., description="조회 종료일 (시작일 이후)")

    @model_validator(mode="after")
    def check_date_range(self):
        if self.to_date <= self.from_date:
            raise ValueError("to_date must be after from_date")
        return self

    def to_params(self, customer_id: Optional[str]) -> ReportParameters:
        """보고서 템플릿이 기대하는 파라미터 이름(from/to/xcus)으로 변환합니다."""
        return {
            "from": self.from_date.isoformat(),
            "to": self.to_date.isoformat(),
            "xcus": customer_id,
        }


class GrossWithVatRequest(DateRangeRequest):
    """부가세 포함 매출 보고서 생성 요청"""
    customer_id: str = Field(..., min_length=1, description="거래처 코드")
    format: OutputFormat = Field(OutputFormat.PDF, description="출력 형식")


class ReportViewRequest(DateRangeRequest):
    """PDF 미리보기(inline) 요청"""
    report_name: str = Field(
        ..., pattern=REPORT_NAME_PATTERN, max_length=REPORT_NAME_MAX_LENGTH, description="보고서 이름"
    )
    customer_id: Optional[str] = Field(None, description="거래처 코드")


class CustomReportRequest(BaseModel):
    """임의 파라미터로 보고서를 생성하는 요청"""
    report_name: str = Field(
        ..., pattern=REPORT_NAME_PATTERN, max_length=REPORT_NAME_MAX_LENGTH, description="보고서 이름"
    )
    format: OutputFormat = Field(OutputFormat.PDF, description="출력 형식")
    params: ReportParameters = Field(default_factory=dict, description="보고서 파라미터")


# =============================================================================
# API 응답 스키마
# =============================================================================
class ReportTemplateRead(BaseModel):
    name: str
    path: str
    modified: str

    @classmethod
    def from_template(cls, template: ReportTemplate) -> "ReportTemplateRead":
        return cls(
            name=template.name,
            path=str(template.path),
            modified=template.modified.strftime("%Y-%m-%d %H:%M:%S"),
        )


class ReportListResponse(BaseModel):
    success: bool = True
    reports: List[ReportTemplateRead]


class CleanupResponse(BaseModel):
    success: bool = True
    message: str
    deleted_count: int


class ConnectionTestResponse(BaseModel):
    success: bool = True
    message: str
    config: Dict[str, Any]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str
