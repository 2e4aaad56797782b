# -*- coding: utf-8 -*-
"""
PushToFolders 메인 진입점

폴더 또는 파일 목록을 받아 이미지 파일을 같은 이름의 폴더로 옮깁니다.
PyInstaller 빌드(build.py)의 진입 스크립트로도 사용됩니다.
"""

import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from pushtofolders.cli import main


if __name__ == "__main__":
    sys.exit(main())
