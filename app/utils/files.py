# app/utils/files.py

import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

# 새로 만드는 디렉토리의 기본 권한 (rwxr-xr-x)
DEFAULT_DIR_MODE = 0o755


def ensure_directories(directories: Iterable[Path], mode: int = DEFAULT_DIR_MODE) -> List[Path]:
    """
    주어진 디렉토리들이 존재하도록 보장합니다.

    - 이미 존재하는 디렉토리는 건드리지 않습니다.
    - 새로 만든 디렉토리만 로그에 남기고 반환합니다.

    Args:
        directories (Iterable[Path]): 확인할 디렉토리 목록
        mode (int): 새로 생성할 디렉토리의 권한

    Returns:
        List[Path]: 이번 호출에서 새로 생성된 디렉토리 목록
    """
    created = []
    for directory in directories:
        directory = Path(directory)
        if directory.exists():
            continue
        directory.mkdir(mode=mode, parents=True, exist_ok=True)
        logger.info("Created directory: %s", directory)
        created.append(directory)
    return created


def delete_files_older_than(directory: Path, max_age_seconds: float, now: Optional[float] = None) -> int:
    """
    디렉토리 바로 아래의 일반 파일 중 수정 시각이 max_age_seconds 이상 지난 파일을 삭제합니다.

    하위 디렉토리와 그 안의 파일은 건드리지 않습니다 (비재귀).

    Args:
        directory (Path): 정리할 디렉토리
        max_age_seconds (float): 보존 기간 (초)
        now (float, optional): 기준 시각 (epoch 초). 기본값은 현재 시각.

    Returns:
        int: 삭제한 파일 수
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0

    now = time.time() if now is None else now
    deleted_count = 0
    for entry in directory.iterdir():
        if not entry.is_file():
            continue
        if now - entry.stat().st_mtime >= max_age_seconds:
            entry.unlink()
            deleted_count += 1
    return deleted_count
