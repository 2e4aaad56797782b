# -*- coding: utf-8 -*-
"""
파일 이동 모듈

이미지 파일을 같은 폴더 안의 '파일명(확장자 제외)' 폴더로 옮깁니다.
폴더 생성, 이름 충돌 검사, 이동 결과 기록을 포함합니다.
기존 파일은 절대 덮어쓰지 않습니다.
"""

import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .classifier import ImageClassifier
from .logger import RunLogger
from .results import ErrorKind, MoveResult


class FolderMover:
    """
    같은 이름 폴더로 파일을 옮기는 클래스

    모든 실패는 예외 대신 MoveResult로 반환하며, 실행 로그에 ERROR로 남기고
    echo가 켜져 있으면 콘솔(stderr)에도 출력합니다.
    """

    def __init__(
        self,
        run_logger: RunLogger,
        classifier: Optional[ImageClassifier] = None,
        echo: bool = True
    ):
        """
        FolderMover 초기화

        Args:
            run_logger: 실행 로그
            classifier: 확장자 분류기 (기본값: ImageClassifier())
            echo: 콘솔 출력 여부
        """
        self.run_logger = run_logger
        self.classifier = classifier or ImageClassifier()
        self.echo = echo

    def move(self, file_path: Union[str, Path]) -> MoveResult:
        """
        파일을 같은 이름의 하위 폴더로 이동합니다.

        예: F/photo.png -> F/photo/photo.png

        Args:
            file_path: 원본 파일 경로

        Returns:
            MoveResult
        """
        source = Path(file_path)

        # 1. 원본 파일 검사 (빈 문자열은 Path("") == "."이 되므로 따로 처리)
        if not str(file_path) or not source.exists():
            shown = str(file_path) or "''"
            return self._fail(source, ErrorKind.NOT_FOUND, shown,
                              "File does not exist.", f"File not found: {shown}")

        if not source.is_file():
            return self._fail(source, ErrorKind.NOT_A_FILE, source,
                              "Path is not a regular file.", f"Not a file: {source}")

        if not self.classifier.is_supported(source):
            self.run_logger.log_info(f"Skipping non-image file: {source}")
            return MoveResult.skipped(source, ErrorKind.UNSUPPORTED_EXTENSION)

        # 2. 대상 폴더 준비
        destination_folder = source.parent / source.stem
        failure = self._ensure_directory(source, destination_folder)
        if failure is not None:
            return failure

        # 3. 이름 충돌 검사 (덮어쓰기 금지)
        destination_file = destination_folder / source.name
        if os.path.lexists(destination_file):
            return self._fail(source, ErrorKind.DESTINATION_CONFLICT, destination_file,
                              "Destination file already exists.",
                              f"Destination already exists: {destination_file}",
                              destination=destination_file)

        # 4. 이동
        try:
            self._rename_no_replace(source, destination_file)
        except FileExistsError:
            # 검사 이후 다른 프로세스가 같은 이름을 만든 경우
            return self._fail(source, ErrorKind.DESTINATION_CONFLICT, destination_file,
                              "Destination file already exists.",
                              f"Destination already exists: {destination_file}",
                              destination=destination_file)
        except OSError as e:
            reason = e.strerror or str(e)
            return self._fail(source, ErrorKind.MOVE_FAILED, destination_file,
                              f"Failed to move file: {reason}",
                              f"Failed to move '{source}': {reason}",
                              destination=destination_file)

        self.run_logger.log_info(f"Moved {source} to {destination_folder}")
        self._print(f"Moved '{source.name}' into '{destination_folder.name}'")
        return MoveResult.success(source, destination_file)

    def move_many(self, file_paths: Iterable[Union[str, Path]]) -> List[MoveResult]:
        """
        여러 파일을 인자 순서대로 이동합니다.

        한 파일의 실패가 나머지 처리를 중단하지 않습니다.
        """
        results = [self.move(path) for path in file_paths]

        if not any(r.moved for r in results):
            self._print("No image files were processed.")

        return results

    @staticmethod
    def _rename_no_replace(source: Path, destination: Path) -> None:
        """
        대상이 이미 있으면 FileExistsError를 내는 이동

        하드 링크를 만든 뒤 원본을 지우며, 하드 링크를 지원하지 않는
        파일 시스템이나 심볼릭 링크는 os.rename으로 처리합니다.
        """
        if source.is_symlink():
            os.rename(source, destination)
            return

        try:
            os.link(source, destination)
        except FileExistsError:
            raise
        except (OSError, NotImplementedError):
            os.rename(source, destination)
            return

        try:
            os.unlink(source)
        except OSError:
            # 원본을 지울 수 없으면 만든 링크를 되돌림
            os.unlink(destination)
            raise

    def _ensure_directory(self, source: Path, folder: Path) -> Optional[MoveResult]:
        """
        대상 폴더가 없으면 생성

        Returns:
            실패 시 MoveResult, 성공 시 None
        """
        if os.path.lexists(folder):
            if not folder.is_dir():
                return self._fail(source, ErrorKind.DESTINATION_IS_FILE, folder,
                                  "A non-directory with the desired folder name already exists.",
                                  f"Cannot create folder '{folder}' because a file exists with that name.")
            return None

        try:
            # 다른 프로세스가 먼저 만든 경우도 성공으로 처리
            folder.mkdir(parents=True, exist_ok=True)
        except FileExistsError:
            return self._fail(source, ErrorKind.DESTINATION_IS_FILE, folder,
                              "A non-directory with the desired folder name already exists.",
                              f"Cannot create folder '{folder}' because a file exists with that name.")
        except OSError as e:
            reason = e.strerror or str(e)
            return self._fail(source, ErrorKind.MOVE_FAILED, folder,
                              f"Failed to create folder: {reason}",
                              f"Failed to create folder '{folder}': {reason}")

        self.run_logger.log_debug(f"Created folder {folder}")
        return None

    def _fail(
        self,
        source: Path,
        kind: ErrorKind,
        target: Union[str, Path],
        log_message: str,
        console_message: str,
        destination: Optional[Path] = None
    ) -> MoveResult:
        self.run_logger.log_error(target, log_message)
        self._print(console_message, error=True)
        return MoveResult.failure(source, kind, detail=log_message, destination=destination)

    def _print(self, message: str, error: bool = False) -> None:
        if self.echo:
            print(message, file=sys.stderr if error else sys.stdout)
