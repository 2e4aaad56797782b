# -*- coding: utf-8 -*-
"""
처리 결과 모델

파일 이동과 폴더 스캔의 결과를 예외 대신 값으로 표현합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ErrorKind(Enum):
    """실패 원인 분류"""
    NOT_FOUND = "not_found"
    NOT_A_FILE = "not_a_file"
    UNSUPPORTED_EXTENSION = "unsupported_extension"  # 정상적인 건너뛰기
    DESTINATION_IS_FILE = "destination_is_file"
    DESTINATION_CONFLICT = "destination_conflict"
    MOVE_FAILED = "move_failed"
    NOT_A_DIRECTORY = "not_a_directory"
    SCAN_FAILED = "scan_failed"
    LOG_UNAVAILABLE = "log_unavailable"


class MoveStatus(Enum):
    """파일 이동 상태"""
    MOVED = "moved"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class MoveResult:
    source: Path
    status: MoveStatus
    destination: Optional[Path] = None
    error: Optional[ErrorKind] = None
    detail: str = ""

    @property
    def moved(self) -> bool:
        return self.status is MoveStatus.MOVED

    @property
    def failed(self) -> bool:
        return self.status is MoveStatus.FAILED

    @classmethod
    def success(cls, source: Path, destination: Path) -> "MoveResult":
        return cls(source, MoveStatus.MOVED, destination=destination)

    @classmethod
    def skipped(cls, source: Path, kind: ErrorKind, detail: str = "") -> "MoveResult":
        return cls(source, MoveStatus.SKIPPED, error=kind, detail=detail)

    @classmethod
    def failure(
        cls,
        source: Path,
        kind: ErrorKind,
        detail: str = "",
        destination: Optional[Path] = None
    ) -> "MoveResult":
        return cls(source, MoveStatus.FAILED, destination=destination, error=kind, detail=detail)


@dataclass
class ScanReport:
    """
    폴더 스캔 결과

    error가 설정되어 있으면 스캔 자체가 실패한 것이며,
    개별 파일의 실패는 results 안의 MoveResult로만 기록됩니다.
    """
    folder: Path
    results: List[MoveResult] = field(default_factory=list)
    error: Optional[ErrorKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def moved_count(self) -> int:
        return sum(1 for r in self.results if r.moved)

    @property
    def skipped_count(self) -> int:
        return sum(1 for r in self.results if r.status is MoveStatus.SKIPPED)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if r.failed)

    @property
    def image_count(self) -> int:
        """지원 확장자를 가진 파일 수 (이동 성공 여부 무관)"""
        return sum(1 for r in self.results if r.error is not ErrorKind.UNSUPPORTED_EXTENSION)

    @property
    def any_moved(self) -> bool:
        return self.moved_count > 0
