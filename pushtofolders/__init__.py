# -*- coding: utf-8 -*-
"""
PushToFolders 패키지

이미지 파일을 같은 이름의 폴더로 정리하는 핵심 모듈들입니다.
"""

from .config import APP_VERSION as __version__
from .results import ErrorKind, MoveStatus, MoveResult, ScanReport
from .logger import RunLogger, detect_log_file_path
from .classifier import ImageClassifier, is_supported
from .mover import FolderMover
from .scanner import FolderScanner

__all__ = [
    'ErrorKind',
    'MoveStatus',
    'MoveResult',
    'ScanReport',
    'RunLogger',
    'detect_log_file_path',
    'ImageClassifier',
    'is_supported',
    'FolderMover',
    'FolderScanner'
]
