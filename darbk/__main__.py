"""Allow ``python -m darbk``."""

import sys

from .main import main

sys.exit(main())
