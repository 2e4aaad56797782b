# -*- coding: utf-8 -*-
"""
setup.py - PushToFolders 설치 스크립트

이미지 파일을 같은 이름의 폴더로 정리하는 프로그램을 패키지로 설치하기 위한 설정 파일입니다.
"""

from setuptools import setup, find_packages
from pathlib import Path

# README 파일 읽기
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8") if (this_directory / "README.md").exists() else ""

setup(
    name="pushtofolders",
    version="1.0.0",
    description="Organise images into same-named folders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",

    # 프로젝트 분류
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: Utilities",
        "Topic :: System :: Filesystems",
    ],

    # 패키지 설정
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,

    # Python 버전 요구사항
    python_requires=">=3.8",

    # 의존성
    install_requires=[
        "python-dotenv>=0.21.0",    # 환경 변수 로드
    ],

    # 개발 의존성
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "isort>=5.10.0",
        ],
        "build": [
            "pyinstaller>=5.0",
        ],
    },

    # 콘솔 스크립트 진입점
    entry_points={
        "console_scripts": [
            "pushtofolders=pushtofolders.cli:main",
        ],
    },

    # 키워드
    keywords="image organize folders file move",

    # ZIP 안전 설정
    zip_safe=False,
)
