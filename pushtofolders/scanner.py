# -*- coding: utf-8 -*-
"""
폴더 스캔 모듈

폴더의 바로 아래 항목만 나열하여 일반 파일을 FolderMover에 넘깁니다.
하위 폴더(방금 만든 대상 폴더 포함)는 탐색하지 않습니다.
"""

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Union

from .mover import FolderMover
from .results import ErrorKind, ScanReport


class FolderScanner:
    """
    비재귀 폴더 스캐너

    max_workers가 1보다 크면 파일 이동을 스레드 풀에서 처리합니다.
    결과 순서는 나열 순서를 유지하지만 로그 줄 순서는 보장하지 않습니다.
    """

    def __init__(self, mover: FolderMover, max_workers: int = 1):
        self.mover = mover
        self.run_logger = mover.run_logger
        self.max_workers = max(1, max_workers)

    def scan(self, folder: Union[str, Path]) -> ScanReport:
        """
        폴더의 이미지 파일을 각각의 이름 폴더로 이동합니다.

        Args:
            folder: 대상 폴더

        Returns:
            ScanReport (폴더 자체의 오류는 report.error에 기록)
        """
        folder = Path(folder)
        report = ScanReport(folder=folder)

        if not folder.is_dir():
            return self._fail(report, ErrorKind.NOT_A_DIRECTORY,
                              "The supplied path is not a directory.",
                              f"The path is not a folder: {folder}")

        try:
            files = self._list_files(folder)
        except OSError as e:
            reason = e.strerror or str(e)
            return self._fail(report, ErrorKind.SCAN_FAILED,
                              f"Failed to scan directory: {reason}",
                              f"Failed to scan directory '{folder}': {reason}")

        self.run_logger.log_debug(f"Scanning {folder}: {len(files)} file(s)")

        if self.max_workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                report.results = list(executor.map(self.mover.move, files))
        else:
            report.results = [self.mover.move(path) for path in files]

        if report.image_count == 0:
            self._print(f"No image files found in {folder}")

        return report

    @staticmethod
    def _list_files(folder: Path) -> List[Path]:
        # 이동 전에 목록을 모두 읽고 디렉토리 핸들을 닫음
        with os.scandir(folder) as entries:
            return sorted(
                Path(entry.path) for entry in entries if entry.is_file()
            )

    def _fail(self, report: ScanReport, kind: ErrorKind, log_message: str, console_message: str) -> ScanReport:
        self.run_logger.log_error(report.folder, log_message)
        self._print(console_message, error=True)
        report.error = kind
        report.detail = log_message
        return report

    def _print(self, message: str, error: bool = False) -> None:
        if self.mover.echo:
            print(message, file=sys.stderr if error else sys.stdout)
