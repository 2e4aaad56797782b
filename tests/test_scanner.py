# -*- coding: utf-8 -*-
"""
폴더 스캔 모듈 테스트
"""

import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path
from unittest.mock import patch
import sys

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pushtofolders.logger import RunLogger
from pushtofolders.mover import FolderMover
from pushtofolders.results import ErrorKind
from pushtofolders.scanner import FolderScanner


class TestFolderScanner(unittest.TestCase):
    """FolderScanner 테스트"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.folder = Path(self.test_dir) / "inbox"
        self.folder.mkdir()

        self.log_path = Path(self.test_dir) / "run.log"
        self.run_logger = RunLogger(self.log_path)
        self.mover = FolderMover(self.run_logger, echo=True)
        self.scanner = FolderScanner(self.mover)

    def tearDown(self):
        self.run_logger.close()
        if os.path.exists(self.test_dir):
            shutil.rmtree(self.test_dir)

    def _touch(self, *names):
        for name in names:
            (self.folder / name).write_text(name, encoding='utf-8')

    def _scan(self, folder=None, scanner=None):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            report = (scanner or self.scanner).scan(folder or self.folder)
        return report, stdout.getvalue(), stderr.getvalue()

    def _log(self) -> str:
        return self.log_path.read_text(encoding='utf-8')

    def test_moves_all_images(self):
        self._touch("a.jpg", "b.PNG", "c.webp")

        report, _, _ = self._scan()

        self.assertTrue(report.ok)
        self.assertTrue(report.any_moved)
        self.assertEqual(report.moved_count, 3)
        for stem, name in [("a", "a.jpg"), ("b", "b.PNG"), ("c", "c.webp")]:
            self.assertTrue((self.folder / stem / name).exists())

    def test_mixed_folder(self):
        """이미지, 일반 파일, 하위 폴더가 섞인 경우"""
        self._touch("photo.jpg", "notes.txt")
        (self.folder / "sub").mkdir()
        (self.folder / "sub" / "nested.png").write_text("x", encoding='utf-8')

        report, _, _ = self._scan()

        self.assertEqual(report.moved_count, 1)
        self.assertEqual(report.skipped_count, 1)
        self.assertEqual(report.failed_count, 0)
        self.assertTrue((self.folder / "notes.txt").exists())
        # 하위 폴더는 탐색하지 않음
        self.assertTrue((self.folder / "sub" / "nested.png").exists())
        self.assertFalse((self.folder / "sub" / "nested").exists())

    def test_empty_folder(self):
        """빈 폴더: 오류 아님"""
        report, stdout, _ = self._scan()

        self.assertTrue(report.ok)
        self.assertFalse(report.any_moved)
        self.assertEqual(report.results, [])
        self.assertIn(f"No image files found in {self.folder}", stdout)
        self.assertNotIn("ERROR", self._log())

    def test_only_unsupported_files(self):
        """지원하지 않는 파일만 있으면 INFO만 기록"""
        self._touch("a.txt", "b.gif", "README")

        report, stdout, _ = self._scan()

        self.assertFalse(report.any_moved)
        self.assertEqual(report.skipped_count, 3)
        self.assertIn("No image files found", stdout)
        log = self._log()
        self.assertNotIn("ERROR", log)
        self.assertEqual(log.count("INFO: Skipping non-image file:"), 3)

    def test_one_failure_does_not_abort(self):
        """한 파일 실패 후에도 계속 진행"""
        self._touch("a.png", "b.png")
        (self.folder / "a").write_text("blocker", encoding='utf-8')

        report, _, stderr = self._scan()

        self.assertEqual(report.failed_count, 1)
        self.assertEqual(report.moved_count, 1)
        self.assertTrue(report.any_moved)
        self.assertTrue((self.folder / "b" / "b.png").exists())
        self.assertIn("because a file exists with that name", stderr)

    def test_second_run_finds_nothing(self):
        """정리된 폴더를 다시 스캔하면 충돌이 아니라 '파일 없음'"""
        self._touch("a.jpg", "b.bmp")
        first, _, _ = self._scan()
        self.assertEqual(first.moved_count, 2)

        second, stdout, _ = self._scan()

        self.assertEqual(second.results, [])
        self.assertFalse(second.any_moved)
        self.assertIn("No image files found", stdout)
        self.assertNotIn("Destination file already exists", self._log())

    def test_not_a_directory(self):
        missing = Path(self.test_dir) / "missing"

        report, _, stderr = self._scan(missing)

        self.assertEqual(report.error, ErrorKind.NOT_A_DIRECTORY)
        self.assertFalse(report.ok)
        self.assertIn(f"The path is not a folder: {missing}", stderr)
        self.assertIn(f"ERROR: The supplied path is not a directory. | Target: {missing}", self._log())

    def test_file_is_not_a_directory(self):
        self._touch("photo.png")

        report, _, _ = self._scan(self.folder / "photo.png")

        self.assertEqual(report.error, ErrorKind.NOT_A_DIRECTORY)
        self.assertTrue((self.folder / "photo.png").exists())

    def test_listing_failure(self):
        """목록 읽기 실패는 스캔 중단"""
        self._touch("a.png")

        with patch("pushtofolders.scanner.os.scandir", side_effect=PermissionError(13, "Permission denied")):
            report, _, stderr = self._scan()

        self.assertEqual(report.error, ErrorKind.SCAN_FAILED)
        self.assertEqual(report.results, [])
        self.assertTrue((self.folder / "a.png").exists())
        self.assertIn("Failed to scan directory", stderr)
        self.assertIn("ERROR: Failed to scan directory: Permission denied", self._log())

    def test_worker_pool(self):
        """스레드 풀 사용 시에도 결과는 나열 순서"""
        names = [f"img{i:02d}.jpg" for i in range(12)]
        self._touch(*names)
        scanner = FolderScanner(self.mover, max_workers=4)

        report, _, _ = self._scan(scanner=scanner)

        self.assertEqual(report.moved_count, 12)
        self.assertEqual([r.source.name for r in report.results], sorted(names))
        log = self._log()
        self.assertEqual(log.count("INFO: Moved "), 12)
        for line in log.splitlines():
            self.assertTrue(line.startswith("[") or line.startswith("--- Run started"))


if __name__ == "__main__":
    unittest.main()
