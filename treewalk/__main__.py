"""Allow running treewalk as ``python -m treewalk``."""

import sys

from .cli import main

sys.exit(main())
