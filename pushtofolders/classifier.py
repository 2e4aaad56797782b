# -*- coding: utf-8 -*-
"""
파일 분류 모듈

확장자 허용 목록을 기준으로 이동 대상 이미지 파일인지 판단합니다.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from .config import SUPPORTED_EXTENSIONS


def is_supported(path: Union[str, Path]) -> bool:
    """기본 허용 목록으로 이미지 파일 여부를 판단합니다."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


class ImageClassifier:
    """
    확장자 기반 이미지 파일 분류기

    대소문자를 구분하지 않으며, 확장자가 없는 파일과 '.png' 같은
    점 파일은 지원하지 않는 것으로 판단합니다.
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        """
        ImageClassifier 초기화

        Args:
            extensions: 허용 확장자 목록 (기본값: SUPPORTED_EXTENSIONS)
        """
        if extensions is None:
            self.extensions = SUPPORTED_EXTENSIONS
        else:
            self.extensions = frozenset(
                ext.lower() if ext.startswith(".") else "." + ext.lower()
                for ext in extensions
            )

    def is_supported(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self.extensions
