"""Allow `python -m fronton`."""

import sys

from fronton.main import main

sys.exit(main())
