# -*- coding: utf-8 -*-
"""
python -m pushtofolders 진입점
"""

import sys

from .cli import main

sys.exit(main())
