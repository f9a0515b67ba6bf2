"""Allow ``python -m mdquill``."""

import sys

from .cli import main

sys.exit(main())
