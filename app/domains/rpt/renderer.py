# app/domains/rpt/renderer.py

"""
외부 렌더링 엔진(JasperStarter) 호출 모듈입니다.

- `ReportRenderer`: (템플릿 경로, 출력 경로 stem, 옵션) -> 엔진 출력 문자열 인터페이스.
- `JasperStarterRenderer`: jasperstarter CLI 를 subprocess 로 실행하는 구현체.
- `render_report`: 엔진을 실행하고 최종 결과 파일 경로(<stem>.<format>)를 계산합니다.
- `verify_artifact`: 결과 파일이 실제로 만들어졌는지 확인합니다.

엔진 호출은 동기식이며 수 초에서 수 분까지 걸릴 수 있습니다.
타임아웃/취소는 호출하는 쪽의 책임입니다.
"""

import logging
import subprocess
from datetime import date, datetime
from pathlib import Path
from typing import List, Protocol

from .exceptions import ArtifactMissing, RenderFailed
from .schemas import InvocationOptions, ParameterValue

logger = logging.getLogger(__name__)

PASSWORD_MASK = "******"


class ReportRenderer(Protocol):
    def process(self, template_path: Path, output_stem: Path, options: InvocationOptions) -> str:
        """템플릿을 렌더링해 <output_stem>.<format> 파일을 만들고, 엔진 출력을 반환합니다."""
        ...


def format_parameter(value: ParameterValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class JasperStarterRenderer:
    """
    jasperstarter CLI 실행기입니다.

    명령행 구성:
        jasperstarter [--locale L] process <template> -o <stem> -f <format>
            [-P key=value ...] -t <driver> -u <user> -p <password> -H <host>
            -n <database> --db-port <port> --db-driver <class> --db-url <url>
            --jdbc-dir <dir> [-r <resources>]
    """

    def __init__(self, executable: str = "jasperstarter"):
        self.executable = executable

    def build_command(
        self,
        template_path: Path,
        output_stem: Path,
        options: InvocationOptions,
        mask_password: bool = False,
    ) -> List[str]:
        command = [self.executable]
        if options.locale:
            command += ["--locale", options.locale]

        command += ["process", str(template_path), "-o", str(output_stem)]
        command += ["-f", *[fmt.value for fmt in options.formats]]

        #  값이 None 인 파라미터는 엔진에 넘기지 않습니다 (템플릿에서 null 로 처리).
        params = [
            f"{key}={format_parameter(value)}"
            for key, value in options.params.items()
            if value is not None
        ]
        if params:
            command += ["-P", *params]

        db = options.db_connection
        password = PASSWORD_MASK if mask_password else db.password.get_secret_value()
        command += [
            "-t", db.driver,
            "-u", db.username,
            "-p", password,
            "-H", db.host,
            "-n", db.database,
            "--db-port", str(db.port),
            "--db-driver", db.jdbc_driver,
            "--db-url", db.jdbc_url,
            "--jdbc-dir", str(db.jdbc_dir),
        ]

        if options.resources is not None:
            command += ["-r", str(options.resources)]

        return command

    def process(self, template_path: Path, output_stem: Path, options: InvocationOptions) -> str:
        command = self.build_command(template_path, output_stem, options)
        logger.debug(
            "Running JasperStarter: %s",
            " ".join(self.build_command(template_path, output_stem, options, mask_password=True)),
        )

        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RenderFailed(
                f"JasperStarter exited with status {e.returncode}: {(e.output or '').strip()}",
                path=template_path,
            ) from e
        except OSError as e:
            raise RenderFailed(f"Failed to run JasperStarter ({self.executable}): {e}", path=template_path) from e

        return completed.stdout or ""


def render_report(
    renderer: ReportRenderer,
    template_path: Path,
    output_stem: Path,
    options: InvocationOptions,
) -> Path:
    """
    렌더링 엔진을 실행하고 예상 결과 파일 경로를 반환합니다.

    엔진 출력은 참고용으로 경고 로그만 남깁니다. 성공 여부는 결과 파일로 판단합니다.
    """
    try:
        output = renderer.process(template_path, output_stem, options)
    except RenderFailed:
        raise
    except Exception as e:
        raise RenderFailed(f"Report rendering failed: {e}", path=template_path) from e

    if output and output.strip():
        logger.warning("JasperReport execution output: %s", output.strip())

    return Path(f"{output_stem}.{options.output_format.value}")


def verify_artifact(artifact_path: Path) -> Path:
    """결과 파일이 존재하고 비어 있지 않은지 확인합니다."""
    artifact_path = Path(artifact_path)
    if not artifact_path.is_file() or artifact_path.stat().st_size == 0:
        raise ArtifactMissing(f"Report file was not generated: {artifact_path}", path=artifact_path)
    return artifact_path
