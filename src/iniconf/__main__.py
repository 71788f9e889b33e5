# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/15 23:31:50

import sys

from .cli import main

sys.exit(main())
