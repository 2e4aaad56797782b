# -*- coding: utf-8 -*-
"""
실행 로그 모듈

프로그램 실행 내역을 사용자 데이터 폴더의 로그 파일에 이어서 기록합니다.
로그 파일을 열 수 없으면 경고만 출력하고 콘솔 출력으로 계속 진행합니다.
"""

import sys
import logging
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import (
    LOG_FILE_NAME,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_LEVEL,
    RUN_MARKER_FORMAT,
    default_log_dir,
)
from .results import ErrorKind

# 패키지 최상위 로거: 각 모듈의 logging.getLogger(__name__)가 여기로 전파됨
LOGGER_NAME = "pushtofolders"


def timestamp_for_log() -> str:
    return datetime.now().strftime(LOG_DATE_FORMAT)


def detect_log_file_path() -> Path:
    """
    로그 파일 경로 결정

    사용자 데이터 폴더를 만들 수 없으면 시스템 임시 폴더를 사용합니다.

    Returns:
        Path: 로그 파일 경로
    """
    log_dir = default_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        log_dir = Path(tempfile.gettempdir())
    return log_dir / LOG_FILE_NAME


class TargetFormatter(logging.Formatter):
    """레코드에 target이 있으면 ' | Target: <path>'를 덧붙이는 포매터"""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        target = getattr(record, "target", None)
        if target:
            line += f" | Target: {target}"
        return line


class RunLogger:
    """
    실행 로그 관리 클래스

    한 프로세스에서 하나만 사용하는 것을 전제로 하며, 생성할 때마다
    패키지 로거의 핸들러를 새로 구성합니다. 파일 쓰기는 logging 핸들러의
    잠금으로 직렬화되므로 여러 스레드에서 호출해도 됩니다.
    """

    def __init__(
        self,
        log_file: Optional[Union[str, Path]] = None,
        log_level: str = LOG_LEVEL,
        write_marker: bool = True
    ):
        """
        RunLogger 초기화

        Args:
            log_file: 로그 파일 경로 (기본값: detect_log_file_path())
            log_level: 로그 레벨 (DEBUG, INFO, ERROR)
            write_marker: 실행 시작 표시 줄 기록 여부
        """
        self.path = Path(log_file) if log_file else detect_log_file_path()
        self.log_level = getattr(logging, log_level.upper(), logging.INFO)
        self.formatter = TargetFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(self.log_level)
        self.logger.propagate = False
        self._reset_handlers()

        self._file_handler: Optional[logging.FileHandler] = None
        # 로그 파일을 열 수 없으면 ErrorKind.LOG_UNAVAILABLE
        self.error: Optional[ErrorKind] = None
        self._add_file_handler(write_marker)

    def _reset_handlers(self) -> None:
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def _add_file_handler(self, write_marker: bool) -> None:
        if write_marker:
            try:
                with open(self.path, "a", encoding="utf-8") as stream:
                    stream.write(RUN_MARKER_FORMAT.format(timestamp=timestamp_for_log()) + "\n")
            except OSError:
                print(f"Warning: Unable to open log file at {self.path}", file=sys.stderr)
                self.error = ErrorKind.LOG_UNAVAILABLE
                return

        # delay=True: 기록할 내용이 생기기 전에는 파일을 만들지 않음
        file_handler = logging.FileHandler(self.path, mode="a", encoding="utf-8", delay=True)
        file_handler.setLevel(self.log_level)
        file_handler.setFormatter(self.formatter)

        self.logger.addHandler(file_handler)
        self._file_handler = file_handler

    def add_console_handler(self, level: Optional[str] = None) -> None:
        """
        로그 레코드를 stderr에도 출력

        Args:
            level: 콘솔 로그 레벨 (기본값: 로거 레벨)
        """
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper(), self.log_level) if level else self.log_level)
        console_handler.setFormatter(self.formatter)
        self.logger.addHandler(console_handler)

    @property
    def available(self) -> bool:
        """로그 파일에 기록 중인지 여부"""
        return self.error is None and self._file_handler is not None

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_error(self, target: Optional[Union[str, Path]], message: str) -> None:
        self.logger.error(message, extra={"target": str(target) if target else ""})

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def read_all(self) -> Optional[str]:
        """
        로그 파일 전체 내용 반환

        Returns:
            로그 내용, 파일이 없거나 읽을 수 없으면 None
        """
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None

    def clear(self) -> bool:
        """
        로그 파일을 비웁니다.

        Returns:
            성공 여부
        """
        handler = self._file_handler
        if handler is not None:
            handler.acquire()
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
            return True
        except OSError:
            return False
        finally:
            if handler is not None:
                handler.release()

    def close(self) -> None:
        """핸들러 정리"""
        self._reset_handlers()
        self._file_handler = None
