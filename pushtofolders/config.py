# -*- coding: utf-8 -*-
"""
PushToFolders 설정 모듈

이미지 파일을 같은 이름의 폴더로 옮기는 프로그램의 전역 설정값을 정의합니다.
환경 변수는 .env 파일에서도 읽어옵니다.
"""

import os
import sys
import tempfile
from pathlib import Path
from dotenv import load_dotenv

# .env 파일에서 환경 변수 로드
load_dotenv()

# ========================
# 기본 정보
# ========================
APP_NAME = "PushToFolders"
APP_VERSION = "1.0.0"

# ========================
# 로깅 설정
# ========================
LOG_FILE_NAME = f"{APP_NAME}.log"
LOG_DIR_ENV = "PUSHTOFOLDERS_LOG_DIR"
LOG_LEVEL = os.getenv("PUSHTOFOLDERS_LOG_LEVEL", "INFO").upper()
LOG_LEVELS = ("DEBUG", "INFO", "ERROR")
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
RUN_MARKER_FORMAT = "--- Run started at {timestamp} ---"

# ========================
# 파일 분류 설정
# ========================
# 이동 대상 이미지 확장자 (소문자로 비교)
SUPPORTED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".bmp", ".webp"})

# ========================
# 명령행 토큰
# ========================
SHOW_LOG_TOKENS = ("--show-log", "/showlog")
CLEAR_LOG_TOKENS = ("--clear-log", "/clearlog")

# ========================
# 성능 설정
# ========================
# 숫자 변환은 validate_config()에서 수행 (잘못된 값도 import는 가능)
SCAN_WORKERS = os.getenv("PUSHTOFOLDERS_SCAN_WORKERS", "1") or "1"


def default_log_dir() -> Path:
    """
    플랫폼별 사용자 데이터 폴더 아래의 로그 디렉토리를 반환합니다.

    환경 변수는 호출 시점에 읽으므로 테스트에서 덮어쓸 수 있습니다.

    Returns:
        Path: 로그 디렉토리 (아직 생성되지 않았을 수 있음)
    """
    override = os.getenv(LOG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    if sys.platform == "win32":
        local_app_data = os.getenv("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data) / APP_NAME
        user_profile = os.getenv("USERPROFILE")
        if user_profile:
            return Path(user_profile)
        return Path(tempfile.gettempdir())

    data_home = os.getenv("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / APP_NAME


def parse_scan_workers(value) -> int:
    """
    작업 스레드 수 변환

    Args:
        value: 정수 또는 문자열 (환경 변수, 명령행 값)

    Returns:
        int: 1 이상의 스레드 수
    """
    try:
        workers = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Scan workers must be a whole number, got {value!r}.") from None

    if workers < 1:
        raise ValueError("Scan workers must be at least 1.")
    return workers


def validate_config(log_level: str = LOG_LEVEL, scan_workers=SCAN_WORKERS) -> bool:
    """설정값 유효성 검사"""
    if log_level.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level} (expected one of {', '.join(LOG_LEVELS)})")

    parse_scan_workers(scan_workers)

    return True


if __name__ == "__main__":
    # 설정 확인
    print("로그 디렉토리:", default_log_dir())
    print("로그 레벨:", LOG_LEVEL)
    print("지원 확장자:", ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    try:
        print("설정 유효성:", validate_config())
    except ValueError as e:
        print(f"설정 유효성 실패: {e}")
